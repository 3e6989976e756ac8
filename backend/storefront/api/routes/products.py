import logging
from fastapi import APIRouter, Depends

from storefront.api.deps import get_store
from storefront.core.errors import InternalError
from storefront.core.store import Store
from storefront.schemas.common import DataResponse
from storefront.schemas.product import ProductListResponse
from storefront.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=DataResponse[ProductListResponse])
async def list_products(store: Store = Depends(get_store)):
    """List every product in the catalog."""
    try:
        products = CatalogService.list_products(store)
    except Exception:
        logger.exception("Error fetching products")
        raise InternalError("Failed to fetch products", "PRODUCTS_FETCH_ERROR")

    return DataResponse(data=ProductListResponse(products=products))
