from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from storefront.models.discount import DiscountCode
from storefront.models.order import Order


class CheckoutRequest(BaseModel):
    """Schema for checking out a cart."""
    cart_id: Optional[str] = None
    discount_code: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "cartId": "cart_1704067200000_k3j9x0a2b",
                "discountCode": "SAVE10_003"
            }
        }


class CheckoutResponse(BaseModel):
    """Schema for checkout response."""
    order: Order
    new_discount_code: Optional[DiscountCode] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
