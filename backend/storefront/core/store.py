"""
In-memory storefront state.

A single Store instance is created at application startup and handed to
every service call; services never reach for module-level state.
"""
import logging
import threading
from typing import Dict, List

from storefront.models.cart import Cart
from storefront.models.discount import DiscountCode
from storefront.models.order import Order
from storefront.models.product import Product

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS: List[dict] = [
    {
        "id": "prod_001",
        "name": "iPhone 15 Pro",
        "price": 999,
        "description": "Latest iPhone with advanced camera",
        "stock": 25
    },
    {
        "id": "prod_002",
        "name": "MacBook Air M3",
        "price": 1299,
        "description": "13-inch laptop with M3 chip",
        "stock": 15
    },
    {
        "id": "prod_003",
        "name": "AirPods Pro",
        "price": 249,
        "description": "Noise cancelling wireless earbuds",
        "stock": 50
    },
    {
        "id": "prod_004",
        "name": "Apple Watch Series 9",
        "price": 399,
        "description": "Advanced smartwatch with health features",
        "stock": 30
    },
    {
        "id": "prod_005",
        "name": 'iPad Pro 11"',
        "price": 799,
        "description": "Professional tablet with M2 chip",
        "stock": 20
    },
]


class Store:
    """Process-lifetime container for catalog, carts, orders and discount codes."""

    def __init__(self, products: List[Product]):
        self.products: Dict[str, Product] = {p.id: p for p in products}
        self.carts: Dict[str, Cart] = {}
        self.orders: Dict[str, Order] = {}
        self.discount_codes: Dict[str, DiscountCode] = {}
        self.order_counter: int = 0
        # Guards every mutation, and the counter increment together with order persistence
        self.lock = threading.RLock()

    def clear(self) -> None:
        """Drop carts, orders and discount codes and zero the counter. Products are kept."""
        with self.lock:
            self.carts.clear()
            self.orders.clear()
            self.discount_codes.clear()
            self.order_counter = 0


def create_store() -> Store:
    """Create a store seeded with the sample catalog."""
    products = [Product(**p) for p in SAMPLE_PRODUCTS]
    store = Store(products)
    logger.info(f"Store initialized with {len(products)} products")
    return store
