"""
Order ledger: sequential numbering and append-only order storage.
"""
import logging
from typing import List

from storefront.core.errors import NotFoundError
from storefront.core.store import Store
from storefront.models.order import Order, OrderDraft
from storefront.utils.helpers import get_current_timestamp

logger = logging.getLogger(__name__)


class OrderService:
    """Service class for the order ledger."""

    @staticmethod
    def next_order_number(store: Store) -> int:
        """Increment the order counter and return the new value."""
        with store.lock:
            store.order_counter += 1
            return store.order_counter

    @staticmethod
    def record(store: Store, draft: OrderDraft) -> Order:
        """
        Number and persist an order.

        The counter increment and the insert happen under one lock so order
        numbers stay gapless and strictly increasing. The counter only moves
        once the order has validated.
        """
        with store.lock:
            order = Order(
                **draft.model_dump(),
                order_number=store.order_counter + 1,
                created_at=get_current_timestamp()
            )
            OrderService.next_order_number(store)
            store.orders[order.id] = order

        logger.info(f"Recorded order #{order.order_number} ({order.id}) total={order.total}")
        return order

    @staticmethod
    def list_orders(store: Store) -> List[Order]:
        return list(store.orders.values())

    @staticmethod
    def get_order(store: Store, order_id: str) -> Order:
        order = store.orders.get(order_id)
        if not order:
            raise NotFoundError("Order not found", "ORDER_NOT_FOUND")
        return order
