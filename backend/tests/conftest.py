"""
Shared fixtures for storefront tests.
"""
import pytest
from fastapi.testclient import TestClient

from storefront.core.store import create_store
from storefront.main import app
from storefront.services.cart_service import CartService


@pytest.fixture
def store():
    """A fresh store seeded with the sample catalog."""
    return create_store()


@pytest.fixture
def make_cart(store):
    """Create a cart holding the given (product_id, quantity) pairs."""
    def _make_cart(*items):
        cart = CartService.create_cart(store)
        for product_id, quantity in items:
            CartService.add_item(store, cart.id, product_id, quantity)
        return cart
    return _make_cart


@pytest.fixture
def client():
    """HTTP client against the app; startup creates a fresh store per test."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
