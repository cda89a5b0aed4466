from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from ..core.database import get_db
from ..core.invalidation_helpers import invalidate_product_cache
from ..auth.authentication import get_current_user
from ..user.models import User
from ..seller import crud as seller_crud
from .schemas import PlaceOrderRequest, PlaceOrderFromCartRequest, UpdateOrderStatusRequest, OrderResponse
from . import crud

router = APIRouter(prefix="/orders", tags=["Orders"])


def _raise_http(e: Exception):
    if isinstance(e, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, LookupError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/place", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    request: PlaceOrderRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        order = crud.place_order(db, current_user, request.items, request.address, request.card_number)
    except (ValueError, LookupError) as e:
        _raise_http(e)
    # Stock figures shown on cached listing pages changed
    await invalidate_product_cache()
    return crud.to_order_response(order)


@router.post("/place-from-cart", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order_from_cart(
    request: PlaceOrderFromCartRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        order = crud.place_order_from_cart(db, current_user, request.address, request.card_number)
    except (ValueError, LookupError) as e:
        _raise_http(e)
    await invalidate_product_cache()
    return crud.to_order_response(order)


@router.get("/my-history", response_model=List[OrderResponse])
async def get_order_history(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [crud.to_order_response(o, include_items=False) for o in crud.get_user_orders(db, current_user.user_id)]


@router.get("/seller/my-orders", response_model=List[OrderResponse])
async def get_seller_orders(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        seller = seller_crud.require_seller(db, current_user)
    except LookupError as e:
        _raise_http(e)
    return [crud.to_order_response(order, items) for order, items in crud.get_seller_orders(db, seller)]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        order = crud.get_order_for_user(db, order_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)
    return crud.to_order_response(order)


@router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    request: UpdateOrderStatusRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        order = crud.update_order_status(db, order_id, current_user, request.status)
    except (ValueError, LookupError, PermissionError) as e:
        _raise_http(e)
    return crud.to_order_response(order)
