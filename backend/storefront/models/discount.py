from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from storefront.utils.helpers import get_current_timestamp


class DiscountCode(BaseModel):
    """Single-use discount code granting a percentage off the subtotal."""
    code: str
    discount: float = Field(gt=0, le=1)  # Fractional rate, e.g. 0.1
    is_used: bool = False
    created_for_order_number: int
    created_at: datetime = Field(default_factory=get_current_timestamp)
    used_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "code": "SAVE10_003",
                "discount": 0.1,
                "isUsed": False,
                "createdForOrderNumber": 3,
                "createdAt": "2024-01-01T00:00:00Z"
            }
        }
