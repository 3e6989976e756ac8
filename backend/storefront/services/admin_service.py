import logging

from storefront.core.errors import EnvironmentRestriction
from storefront.core.store import Store
from storefront.schemas.admin import AdminStatsResponse
from storefront.services.discount_service import DiscountService
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)


class AdminService:
    """Administrative operations over the whole store."""

    @staticmethod
    def get_stats(store: Store) -> AdminStatsResponse:
        """
        Aggregate order and discount statistics.

        Recomputed from the ledger and registry on every call.
        """
        with store.lock:
            orders = OrderService.list_orders(store)
            discount_codes = DiscountService.list_all(store)

        total_items_purchased = sum(
            item.quantity for order in orders for item in order.items
        )
        total_revenue = sum(order.total for order in orders)
        total_discount_amount = sum(order.discount_amount for order in orders)
        unused_discount_codes = len([code for code in discount_codes if not code.is_used])

        return AdminStatsResponse(
            total_orders=len(orders),
            total_items_purchased=total_items_purchased,
            total_revenue=total_revenue,
            total_discount_amount=total_discount_amount,
            discount_codes=discount_codes,
            unused_discount_codes=unused_discount_codes,
            orders=orders
        )

    @staticmethod
    def reset_store(store: Store, environment: str) -> None:
        """
        Clear carts, orders and discount codes and zero the order counter.

        Raises:
            EnvironmentRestriction: When running in production
        """
        if environment.lower() == "production":
            logger.warning("Store reset refused in production")
            raise EnvironmentRestriction(
                "Reset not allowed in production",
                "PRODUCTION_RESET_DENIED"
            )

        store.clear()
        logger.info("Store reset: carts, orders and discount codes cleared")
