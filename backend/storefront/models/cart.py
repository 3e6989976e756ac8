from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from storefront.utils.helpers import get_current_timestamp


class CartItem(BaseModel):
    """Item in a shopping cart."""
    product_id: str
    quantity: int = Field(gt=0)
    price: float = Field(gt=0)  # Snapshot of the product price at first add

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Cart(BaseModel):
    """Shopping cart held by the in-memory store."""
    id: str
    items: List[CartItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=get_current_timestamp)
    updated_at: datetime = Field(default_factory=get_current_timestamp)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "cart_1704067200000_k3j9x0a2b",
                "items": [
                    {
                        "productId": "prod_001",
                        "quantity": 2,
                        "price": 999
                    }
                ],
                "createdAt": "2024-01-01T00:00:00Z",
                "updatedAt": "2024-01-01T00:00:00Z"
            }
        }

    def find_item(self, product_id: str) -> Optional[CartItem]:
        """Return the item for a product, if the cart holds one."""
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def touch(self) -> None:
        self.updated_at = get_current_timestamp()
