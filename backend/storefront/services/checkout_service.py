"""
Checkout: converts a cart into an order, redeems an optional discount code
and issues a loyalty code every Nth order.
"""
import logging
from typing import Optional, Tuple

from storefront.core.errors import BusinessRuleViolation, ValidationError
from storefront.core.store import Store
from storefront.models.discount import DiscountCode
from storefront.models.order import Order, OrderDraft
from storefront.services.cart_service import CartService
from storefront.services.discount_service import DiscountService
from storefront.services.order_service import OrderService
from storefront.utils.helpers import generate_uuid

logger = logging.getLogger(__name__)


class CheckoutService:
    """Service class for the checkout transaction."""

    @staticmethod
    def checkout(
        store: Store,
        cart_id: str,
        discount_code: Optional[str] = None
    ) -> Tuple[Order, Optional[DiscountCode]]:
        """
        Check out a cart.

        Steps, each a possible abort point until the discount code is consumed:
        1. Load the cart and reject it if empty
        2. Compute the subtotal
        3. Validate, price and consume the discount code, if any
        4. Record the order and delete the cart
        5. Issue a new discount code when the order number is a multiple of N

        The discount code is consumed before the order is recorded and is not
        restored on failure. Nothing after that point may raise.

        Returns:
            The recorded order and the newly issued discount code, if any
        """
        if not cart_id:
            raise ValidationError("Cart ID is required", "MISSING_CART_ID")

        with store.lock:
            cart = CartService.get_cart(store, cart_id)

            if not cart.items:
                raise BusinessRuleViolation("Cart is empty", "EMPTY_CART")

            subtotal = sum(item.price * item.quantity for item in cart.items)

            discount_amount = 0.0
            applied_code = None

            if discount_code:
                discount = DiscountService.lookup(store, discount_code)

                if not discount:
                    raise BusinessRuleViolation(
                        "Invalid discount code",
                        "INVALID_DISCOUNT_CODE"
                    )

                if discount.is_used:
                    raise BusinessRuleViolation(
                        "Discount code has already been used",
                        "DISCOUNT_CODE_USED"
                    )

                discount_amount = DiscountService.calculate_discount(subtotal, discount.discount)
                applied_code = discount_code
                DiscountService.mark_used(store, discount_code)
                logger.info(f"Redeemed discount code {discount_code} on cart {cart_id}")

            total = subtotal - discount_amount

            order = OrderService.record(store, OrderDraft(
                id=f"order_{generate_uuid()}",
                cart_id=cart_id,
                items=[item.model_copy() for item in cart.items],
                subtotal=subtotal,
                discount_code=applied_code,
                discount_amount=discount_amount,
                total=total
            ))

            CartService.delete_cart(store, cart_id)

            new_discount_code = None
            if DiscountService.should_generate_discount(order.order_number):
                new_discount_code = CheckoutService._issue_loyalty_code(store, order.order_number)

        return order, new_discount_code

    @staticmethod
    def _issue_loyalty_code(store: Store, order_number: int) -> Optional[DiscountCode]:
        """Issue the code earned by an order unless the name was taken by a manual issue."""
        generated = DiscountService.generate_discount_code(order_number)

        if DiscountService.lookup(store, generated.code):
            logger.warning(
                f"Discount code {generated.code} already issued manually; "
                f"order #{order_number} receives no new code"
            )
            return None

        return DiscountService.issue(store, generated)
