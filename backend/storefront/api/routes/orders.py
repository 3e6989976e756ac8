import logging
from fastapi import APIRouter, Depends

from storefront.api.deps import get_store
from storefront.core.errors import InternalError, StoreError
from storefront.core.store import Store
from storefront.models.order import Order
from storefront.schemas.common import DataResponse
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{order_id}", response_model=DataResponse[Order])
async def get_order(order_id: str, store: Store = Depends(get_store)):
    """Get a completed order by id."""
    try:
        order = OrderService.get_order(store, order_id)
    except StoreError:
        raise
    except Exception:
        logger.exception(f"Error fetching order {order_id}")
        raise InternalError("Failed to fetch order", "ORDER_FETCH_ERROR")

    return DataResponse(data=order)
