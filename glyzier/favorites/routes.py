from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from ..core.database import get_db
from ..auth.authentication import get_current_user
from ..user.models import User
from .schemas import FavoriteResponse
from . import crud

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=List[FavoriteResponse])
async def get_favorites(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [crud.to_favorite_response(f) for f in crud.get_favorites(db, current_user)]


@router.get("/count", response_model=dict)
async def count_favorites(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"count": crud.count_favorites(db, current_user)}


@router.get("/check/{product_id}", response_model=dict)
async def check_favorite(product_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"is_favorited": crud.is_favorited(db, current_user, product_id)}


@router.post("/{product_id}", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(product_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        favorite, _ = crud.add_favorite(db, current_user, product_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return crud.to_favorite_response(favorite)


@router.delete("/{product_id}", response_model=dict)
async def remove_favorite(product_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        crud.remove_favorite(db, current_user, product_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Product removed from favorites"}
