from typing import List
from pydantic import BaseModel

from storefront.models.product import Product


class ProductListResponse(BaseModel):
    """Schema for the product listing."""
    products: List[Product]
