"""
Tests for route handlers called directly with an explicit store.
"""
import pytest

from storefront.api.routes.admin import generate_discount_code, get_stats, reset_store
from storefront.api.routes.cart import add_to_cart, create_cart, get_cart, remove_from_cart
from storefront.api.routes.checkout import checkout
from storefront.api.routes.discount_codes import list_discount_codes
from storefront.api.routes.orders import get_order
from storefront.api.routes.products import list_products
from storefront.core.config import Settings
from storefront.core.errors import EnvironmentRestriction, NotFoundError
from storefront.schemas.admin import GenerateDiscountRequest
from storefront.schemas.cart import AddToCartRequest
from storefront.schemas.checkout import CheckoutRequest


class TestProductRoutes:
    """Test product listing."""

    @pytest.mark.asyncio
    async def test_list_products(self, store):
        result = await list_products(store=store)
        products = result.data.products
        assert [p.id for p in products] == ["prod_001", "prod_002", "prod_003", "prod_004", "prod_005"]
        assert products[0].name == "iPhone 15 Pro"


class TestCartRoutes:
    """Test cart handlers."""

    @pytest.mark.asyncio
    async def test_cart_flow(self, store):
        """Test create, add, get and remove through the handlers."""
        created = await create_cart(store=store)
        cart_id = created.data.id

        await add_to_cart(
            cart_id=cart_id,
            request=AddToCartRequest(productId="prod_001", quantity=2),
            store=store
        )
        fetched = await get_cart(cart_id=cart_id, store=store)
        assert fetched.data.items[0].quantity == 2

        removed = await remove_from_cart(cart_id=cart_id, product_id="prod_001", store=store)
        assert removed.data.items == []

    @pytest.mark.asyncio
    async def test_get_unknown_cart(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            await get_cart(cart_id="cart_missing", store=store)
        assert exc_info.value.code == "CART_NOT_FOUND"


class TestCheckoutRoutes:
    """Test checkout and order handlers."""

    @pytest.mark.asyncio
    async def test_checkout_and_fetch_order(self, store):
        cart = (await create_cart(store=store)).data
        await add_to_cart(
            cart_id=cart.id,
            request=AddToCartRequest(product_id="prod_005", quantity=1),
            store=store
        )

        result = await checkout(request=CheckoutRequest(cartId=cart.id), store=store)
        order = result.data.order
        assert order.order_number == 1
        assert order.total == 799
        assert result.data.new_discount_code is None

        fetched = await get_order(order_id=order.id, store=store)
        assert fetched.data == order


class TestAdminRoutes:
    """Test admin handlers."""

    @pytest.mark.asyncio
    async def test_generated_code_is_listed(self, store):
        result = await generate_discount_code(
            request=GenerateDiscountRequest(forceGenerate=True),
            store=store
        )
        assert result.data.discount_code.code == "SAVE10_001"

        listed = await list_discount_codes(store=store)
        assert [c.code for c in listed.data] == ["SAVE10_001"]

        stats = await get_stats(store=store)
        assert stats.data.unused_discount_codes == 1

    @pytest.mark.asyncio
    async def test_reset(self, store):
        await create_cart(store=store)
        result = await reset_store(store=store, app_settings=Settings(ENVIRONMENT="test"))
        assert result.data.message == "Store reset successfully"
        assert store.carts == {}

    @pytest.mark.asyncio
    async def test_reset_denied_in_production(self, store):
        with pytest.raises(EnvironmentRestriction):
            await reset_store(store=store, app_settings=Settings(ENVIRONMENT="production"))
