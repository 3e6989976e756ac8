from typing import List, Optional

from storefront.core.store import Store
from storefront.models.product import Product


class CatalogService:
    """Read-only access to the product catalog."""

    @staticmethod
    def list_products(store: Store) -> List[Product]:
        return list(store.products.values())

    @staticmethod
    def get_product(store: Store, product_id: str) -> Optional[Product]:
        return store.products.get(product_id)
