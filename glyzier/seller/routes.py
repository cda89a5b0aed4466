from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from ..core.database import get_db
from ..auth.authentication import get_current_user
from ..user.models import User
from .schemas import SellerRegisterRequest, SellerResponse
from . import crud

router = APIRouter(prefix="/sellers", tags=["Sellers"])


@router.post("/register", response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
async def register_seller(
    request: SellerRegisterRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return crud.register_seller(db, current_user, request.seller_name, request.store_bio)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[SellerResponse])
async def list_sellers(db: Session = Depends(get_db)):
    return crud.get_sellers(db)


# Fixed paths are declared before /{seller_id} so they are not parsed as ids
@router.get("/me", response_model=SellerResponse)
async def get_my_seller_profile(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return crud.require_seller(db, current_user)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/check", response_model=dict)
async def check_seller(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"is_seller": crud.get_seller_by_user(db, current_user.user_id) is not None}


@router.get("/{seller_id}", response_model=SellerResponse)
async def get_seller(seller_id: int, db: Session = Depends(get_db)):
    seller = crud.get_seller(db, seller_id)
    if not seller:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Seller not found")
    return seller
