import logging
from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_store
from storefront.core.errors import InternalError, StoreError
from storefront.core.store import Store
from storefront.schemas.checkout import CheckoutRequest, CheckoutResponse
from storefront.schemas.common import DataResponse
from storefront.services.checkout_service import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=DataResponse[CheckoutResponse], status_code=status.HTTP_201_CREATED)
async def checkout(
    request: CheckoutRequest,
    store: Store = Depends(get_store)
):
    """
    Check out a cart.

    This will:
    1. Validate the cart and the optional discount code
    2. Create the order with the next sequential order number
    3. Delete the cart
    4. Issue a new discount code on every 3rd order
    """
    try:
        order, new_discount_code = CheckoutService.checkout(
            store,
            cart_id=request.cart_id,
            discount_code=request.discount_code
        )
    except StoreError:
        raise
    except Exception:
        logger.exception("Error processing checkout")
        raise InternalError("Failed to process checkout", "CHECKOUT_ERROR")

    return DataResponse(data=CheckoutResponse(
        order=order,
        new_discount_code=new_discount_code
    ))
