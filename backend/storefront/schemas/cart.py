from typing import Optional
from pydantic import BaseModel, StrictInt
from pydantic.alias_generators import to_camel


class AddToCartRequest(BaseModel):
    """Schema for adding a product to cart."""
    product_id: Optional[str] = None
    quantity: StrictInt

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "productId": "prod_001",
                "quantity": 2
            }
        }
