"""Schemas for admin endpoints."""

from typing import List
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from storefront.models.discount import DiscountCode
from storefront.models.order import Order


class AdminStatsResponse(BaseModel):
    """Schema for store-wide statistics."""
    total_orders: int = Field(..., description="Number of completed orders")
    total_items_purchased: int = Field(..., description="Sum of item quantities over all orders")
    total_revenue: float = Field(..., description="Sum of order totals after discounts")
    total_discount_amount: float = Field(..., description="Sum of discounts granted")
    discount_codes: List[DiscountCode] = Field(..., description="All issued discount codes")
    unused_discount_codes: int = Field(..., description="Number of codes not yet redeemed")
    orders: List[Order] = Field(..., description="All completed orders")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "totalOrders": 3,
                "totalItemsPurchased": 4,
                "totalRevenue": 2746.2,
                "totalDiscountAmount": 49.8,
                "discountCodes": [],
                "unusedDiscountCodes": 1,
                "orders": []
            }
        }


class GenerateDiscountRequest(BaseModel):
    """Schema for manual discount code issuance."""
    force_generate: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "forceGenerate": True
            }
        }


class GenerateDiscountResponse(BaseModel):
    discount_code: DiscountCode

    class Config:
        alias_generator = to_camel
        populate_by_name = True
