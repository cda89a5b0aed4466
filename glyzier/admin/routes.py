from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import json
import logging
from ..core.database import get_db
from ..core.cache import get_cache, set_cache
from ..core.invalidation_helpers import DASHBOARD_STATS_KEY, invalidate_product_cache
from ..auth.authentication import get_current_admin
from ..user.models import User
from ..user import crud as user_crud
from .schemas import DashboardStats, AdminUserResponse, AdminProductResponse
from . import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/dashboard/stats", response_model=DashboardStats)
async def get_dashboard_stats(current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    cached_data = await get_cache(DASHBOARD_STATS_KEY)
    if cached_data:
        logger.info("Returning dashboard stats from cache")
        return json.loads(cached_data)

    result = crud.get_dashboard_stats(db)
    await set_cache(DASHBOARD_STATS_KEY, json.dumps(result), 60)
    return result


@router.get("/users", response_model=List[AdminUserResponse])
async def get_all_users(current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    return [crud.to_admin_user_response(u) for u in user_crud.get_users(db)]


@router.post("/users/{user_id}/ban", response_model=AdminUserResponse)
async def ban_user(user_id: int, current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    try:
        user = crud.ban_user(db, user_id, current_admin)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return crud.to_admin_user_response(user)


@router.post("/users/{user_id}/unban", response_model=AdminUserResponse)
async def unban_user(user_id: int, current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    try:
        user = crud.unban_user(db, user_id, current_admin)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return crud.to_admin_user_response(user)


@router.get("/products", response_model=List[AdminProductResponse])
async def get_all_products(current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    return crud.get_all_products(db)


@router.delete("/products/{product_id}", response_model=AdminProductResponse)
async def remove_product(product_id: int, current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    try:
        product = crud.remove_product(db, product_id, current_admin)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    await invalidate_product_cache()
    return crud.to_admin_product_response(product)


@router.post("/products/{product_id}/restore", response_model=AdminProductResponse)
async def restore_product(product_id: int, current_admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    try:
        product = crud.restore_product(db, product_id, current_admin)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    await invalidate_product_cache()
    return crud.to_admin_product_response(product)
