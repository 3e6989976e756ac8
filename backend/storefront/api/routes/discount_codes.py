import logging
from typing import List
from fastapi import APIRouter, Depends

from storefront.api.deps import get_store
from storefront.core.errors import InternalError
from storefront.core.store import Store
from storefront.models.discount import DiscountCode
from storefront.schemas.common import DataResponse
from storefront.services.discount_service import DiscountService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=DataResponse[List[DiscountCode]])
async def list_discount_codes(store: Store = Depends(get_store)):
    """List discount codes that can still be redeemed."""
    try:
        codes = DiscountService.list_unused(store)
    except Exception:
        logger.exception("Error fetching discount codes")
        raise InternalError("Failed to fetch discount codes", "DISCOUNT_CODES_FETCH_ERROR")

    return DataResponse(data=codes)
