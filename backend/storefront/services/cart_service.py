import logging

from storefront.core.errors import BusinessRuleViolation, NotFoundError, ValidationError
from storefront.core.store import Store
from storefront.models.cart import Cart, CartItem
from storefront.services.catalog_service import CatalogService
from storefront.utils.helpers import generate_uuid, get_current_timestamp

logger = logging.getLogger(__name__)


class CartService:
    """Service for cart operations."""

    @staticmethod
    def create_cart(store: Store) -> Cart:
        """Create an empty cart."""
        now = get_current_timestamp()
        cart = Cart(
            id=f"cart_{generate_uuid()}",
            items=[],
            created_at=now,
            updated_at=now
        )
        with store.lock:
            store.carts[cart.id] = cart
        logger.debug(f"Created cart {cart.id}")
        return cart

    @staticmethod
    def get_cart(store: Store, cart_id: str) -> Cart:
        """Get a cart by id."""
        if not cart_id:
            raise ValidationError("Cart ID is required", "MISSING_CART_ID")

        cart = store.carts.get(cart_id)
        if not cart:
            raise NotFoundError("Cart not found", "CART_NOT_FOUND")

        return cart

    @staticmethod
    def add_item(
        store: Store,
        cart_id: str,
        product_id: str,
        quantity: int
    ) -> Cart:
        """
        Add a product to the cart.

        If the product is already in the cart its quantity is increased and
        the price captured at the first add is kept.
        """
        if not product_id or quantity is None or quantity <= 0:
            raise ValidationError(
                "Valid product ID and quantity are required",
                "INVALID_INPUT"
            )

        with store.lock:
            cart = CartService.get_cart(store, cart_id)

            # Validate product exists
            product = CatalogService.get_product(store, product_id)
            if not product:
                raise NotFoundError("Product not found", "PRODUCT_NOT_FOUND")

            # Check stock
            if product.stock < quantity:
                raise BusinessRuleViolation(
                    "Insufficient stock",
                    "INSUFFICIENT_STOCK",
                    details={"available": product.stock, "requested": quantity}
                )

            item = cart.find_item(product_id)
            if item:
                item.quantity += quantity
            else:
                cart.items.append(CartItem(
                    product_id=product_id,
                    quantity=quantity,
                    price=product.price
                ))

            cart.touch()

        return cart

    @staticmethod
    def remove_item(store: Store, cart_id: str, product_id: str) -> Cart:
        """Remove an item from the cart."""
        if not product_id:
            raise ValidationError("Cart ID and Product ID are required", "MISSING_IDS")

        with store.lock:
            cart = CartService.get_cart(store, cart_id)

            original_length = len(cart.items)
            cart.items = [item for item in cart.items if item.product_id != product_id]

            if len(cart.items) == original_length:
                raise NotFoundError("Item not found in cart", "ITEM_NOT_FOUND")

            cart.touch()

        return cart

    @staticmethod
    def delete_cart(store: Store, cart_id: str) -> bool:
        """Delete a cart. Returns whether it existed."""
        with store.lock:
            return store.carts.pop(cart_id, None) is not None
