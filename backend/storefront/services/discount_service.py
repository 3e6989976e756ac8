"""
Discount code registry and loyalty code generation.
"""
import logging
from typing import List, Optional
from fastapi import status

from storefront.core.config import settings
from storefront.core.errors import BusinessRuleViolation, ValidationError
from storefront.core.store import Store
from storefront.models.discount import DiscountCode
from storefront.utils.helpers import get_current_timestamp, round_currency

logger = logging.getLogger(__name__)


class DiscountService:
    """Service for issuing, looking up and redeeming discount codes."""

    @staticmethod
    def generate_discount_code(order_number: int) -> DiscountCode:
        """
        Build a fresh, unused discount code named after an order number.

        Order 3 yields ``SAVE10_003``.
        """
        code = f"{settings.DISCOUNT_CODE_PREFIX}_{order_number:03d}"
        return DiscountCode(
            code=code,
            discount=settings.DISCOUNT_PERCENTAGE,
            is_used=False,
            created_for_order_number=order_number,
            created_at=get_current_timestamp()
        )

    @staticmethod
    def should_generate_discount(order_number: int) -> bool:
        """Whether an order number earns a new discount code."""
        return order_number > 0 and order_number % settings.DISCOUNT_EVERY_N_ORDERS == 0

    @staticmethod
    def calculate_discount(subtotal: float, discount_percentage: float) -> float:
        """Discount amount in cents precision."""
        return round_currency(subtotal * discount_percentage)

    @staticmethod
    def issue(store: Store, discount_code: DiscountCode) -> DiscountCode:
        """
        Store a discount code under its code string.

        Raises:
            BusinessRuleViolation: If a code with the same name already exists
        """
        with store.lock:
            if discount_code.code in store.discount_codes:
                raise BusinessRuleViolation(
                    f"Discount code {discount_code.code} already exists",
                    "DISCOUNT_CODE_EXISTS",
                    status_code=status.HTTP_409_CONFLICT
                )
            store.discount_codes[discount_code.code] = discount_code

        logger.info(
            f"Issued discount code {discount_code.code} "
            f"for order #{discount_code.created_for_order_number}"
        )
        return discount_code

    @staticmethod
    def lookup(store: Store, code: str) -> Optional[DiscountCode]:
        return store.discount_codes.get(code)

    @staticmethod
    def mark_used(store: Store, code: str) -> Optional[DiscountCode]:
        """
        Flag a code as redeemed.

        Does not look at the previous state; callers check ``is_used`` first.
        Returns None for unknown codes.
        """
        with store.lock:
            discount = store.discount_codes.get(code)
            if discount:
                discount.is_used = True
                discount.used_at = get_current_timestamp()
        return discount

    @staticmethod
    def list_all(store: Store) -> List[DiscountCode]:
        return list(store.discount_codes.values())

    @staticmethod
    def list_unused(store: Store) -> List[DiscountCode]:
        return [code for code in store.discount_codes.values() if not code.is_used]

    @staticmethod
    def generate_admin_code(store: Store, force_generate: bool) -> DiscountCode:
        """
        Issue a discount code outside of checkout.

        The code is named after the next order number the store would hand
        out. No order is created.
        """
        if not force_generate:
            raise ValidationError(
                "This endpoint is for admin testing only. Set forceGenerate: true",
                "ADMIN_ONLY"
            )

        with store.lock:
            discount_code = DiscountService.generate_discount_code(store.order_counter + 1)
            return DiscountService.issue(store, discount_code)
