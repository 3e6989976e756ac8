from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """Catalog product. Immutable once the catalog is seeded."""
    id: str
    name: str
    price: float = Field(gt=0)
    description: str
    stock: int = Field(ge=0)

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "prod_001",
                "name": "iPhone 15 Pro",
                "price": 999,
                "description": "Latest iPhone with advanced camera",
                "stock": 25
            }
        }
