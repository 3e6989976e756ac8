from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from storefront.models.cart import CartItem


class OrderDraft(BaseModel):
    """Order contents computed at checkout, before a number is assigned."""
    id: str
    cart_id: str
    items: List[CartItem]
    subtotal: float
    discount_code: Optional[str] = None
    discount_amount: float = 0.0
    total: float


class Order(BaseModel):
    """Completed order. Never mutated after it is recorded."""
    id: str
    order_number: int = Field(ge=1)
    cart_id: str  # Origin reference only; the cart is deleted at checkout
    items: List[CartItem]
    subtotal: float
    discount_code: Optional[str] = None
    discount_amount: float = 0.0
    total: float
    created_at: datetime

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "order_1704067200000_p0q8r7s6t",
                "orderNumber": 3,
                "cartId": "cart_1704067200000_k3j9x0a2b",
                "items": [
                    {"productId": "prod_003", "quantity": 2, "price": 249}
                ],
                "subtotal": 498,
                "discountCode": "SAVE10_003",
                "discountAmount": 49.8,
                "total": 448.2,
                "createdAt": "2024-01-01T00:00:00Z"
            }
        }
