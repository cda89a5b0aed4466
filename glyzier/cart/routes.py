from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..auth.authentication import get_current_user
from ..user.models import User
from .schemas import AddToCartRequest, UpdateCartItemRequest, CartResponse
from . import crud

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartResponse)
async def get_cart(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.to_cart_response(crud.get_or_create_cart(db, current_user))


@router.post("/add", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        cart = crud.add_to_cart(db, current_user, request.product_id, request.quantity)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return crud.to_cart_response(cart)


@router.put("/update/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: int,
    request: UpdateCartItemRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        cart = crud.update_cart_item(db, current_user, product_id, request.quantity)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return crud.to_cart_response(cart)


@router.delete("/remove/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        cart = crud.remove_from_cart(db, current_user, product_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return crud.to_cart_response(cart)


@router.delete("/clear", response_model=dict)
async def clear_cart(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    crud.clear_cart(db, current_user)
    return {"message": "Cart cleared successfully"}


@router.get("/count", response_model=dict)
async def get_cart_count(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"count": crud.count_items(db, current_user)}
