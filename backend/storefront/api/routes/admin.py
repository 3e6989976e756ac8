import logging
from typing import Optional
from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_settings, get_store
from storefront.core.config import Settings
from storefront.core.errors import InternalError, StoreError
from storefront.core.store import Store
from storefront.schemas.admin import (
    AdminStatsResponse,
    GenerateDiscountRequest,
    GenerateDiscountResponse
)
from storefront.schemas.common import DataResponse, MessageResponse
from storefront.services.admin_service import AdminService
from storefront.services.discount_service import DiscountService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=DataResponse[AdminStatsResponse])
async def get_stats(store: Store = Depends(get_store)):
    """
    Get store-wide statistics.

    Returns:
    - Order count, items purchased, revenue and discount totals
    - Every discount code and how many are still unused
    - Every completed order
    """
    try:
        stats = AdminService.get_stats(store)
    except Exception:
        logger.exception("Error fetching admin stats")
        raise InternalError("Failed to fetch statistics", "STATS_ERROR")

    return DataResponse(data=stats)


@router.post(
    "/discount",
    response_model=DataResponse[GenerateDiscountResponse],
    status_code=status.HTTP_201_CREATED
)
async def generate_discount_code(
    request: Optional[GenerateDiscountRequest] = None,
    store: Store = Depends(get_store)
):
    """
    Issue a discount code without placing an order.

    For admin testing only; requires forceGenerate: true. A request without
    a body is refused the same way as one with the flag unset.
    """
    force_generate = request.force_generate if request else False

    try:
        discount_code = DiscountService.generate_admin_code(store, force_generate)
    except StoreError:
        raise
    except Exception:
        logger.exception("Error generating discount code")
        raise InternalError("Failed to generate discount code", "DISCOUNT_GENERATION_ERROR")

    return DataResponse(data=GenerateDiscountResponse(discount_code=discount_code))


@router.post("/reset", response_model=DataResponse[MessageResponse])
async def reset_store(
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings)
):
    """
    Clear carts, orders and discount codes. The catalog is kept.

    Refused when ENVIRONMENT is production.
    """
    try:
        AdminService.reset_store(store, app_settings.ENVIRONMENT)
    except StoreError:
        raise
    except Exception:
        logger.exception("Error resetting store")
        raise InternalError("Failed to reset store", "RESET_ERROR")

    return DataResponse(data=MessageResponse(message="Store reset successfully"))
