import logging
from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_store
from storefront.core.errors import InternalError, StoreError
from storefront.core.store import Store
from storefront.models.cart import Cart
from storefront.schemas.cart import AddToCartRequest
from storefront.schemas.common import DataResponse
from storefront.services.cart_service import CartService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=DataResponse[Cart], status_code=status.HTTP_201_CREATED)
async def create_cart(store: Store = Depends(get_store)):
    """Create an empty cart."""
    try:
        cart = CartService.create_cart(store)
    except Exception:
        logger.exception("Error creating cart")
        raise InternalError("Failed to create cart", "CART_CREATION_ERROR")

    return DataResponse(data=cart)


@router.get("/{cart_id}", response_model=DataResponse[Cart])
async def get_cart(cart_id: str, store: Store = Depends(get_store)):
    """Get a cart with its items."""
    try:
        cart = CartService.get_cart(store, cart_id)
    except StoreError:
        raise
    except Exception:
        logger.exception(f"Error fetching cart {cart_id}")
        raise InternalError("Failed to fetch cart", "CART_FETCH_ERROR")

    return DataResponse(data=cart)


@router.post("/{cart_id}/items", response_model=DataResponse[Cart])
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    store: Store = Depends(get_store)
):
    """
    Add a product to the cart.

    Validates:
    - Product exists
    - Sufficient stock available

    If product already in cart, increases quantity and keeps the original price.
    """
    try:
        cart = CartService.add_item(
            store,
            cart_id=cart_id,
            product_id=request.product_id,
            quantity=request.quantity
        )
    except StoreError:
        raise
    except Exception:
        logger.exception(f"Error adding item to cart {cart_id}")
        raise InternalError("Failed to add item to cart", "ADD_TO_CART_ERROR")

    return DataResponse(data=cart)


@router.delete("/{cart_id}/items/{product_id}", response_model=DataResponse[Cart])
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    store: Store = Depends(get_store)
):
    """
    Remove an item from the cart.
    """
    try:
        cart = CartService.remove_item(store, cart_id, product_id)
    except StoreError:
        raise
    except Exception:
        logger.exception(f"Error removing item from cart {cart_id}")
        raise InternalError("Failed to remove item from cart", "REMOVE_FROM_CART_ERROR")

    return DataResponse(data=cart)
