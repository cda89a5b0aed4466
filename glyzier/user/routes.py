from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..auth.authentication import get_current_user
from .models import User
from .schemas import UserResponse, UpdateProfileRequest, ChangePasswordRequest
from . import crud
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    return crud.to_user_response(current_user)


@router.put("/profile", response_model=dict)
async def update_profile(
    profile: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user = crud.update_profile(db, current_user, profile)
    logger.info(f"Profile updated for user {user.user_id}")
    return {
        "message": "Profile updated successfully",
        "user": UserResponse.model_validate(crud.to_user_response(user)).model_dump()
    }


@router.put("/change-password", response_model=dict)
async def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        crud.change_password(db, current_user, request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.info(f"Password changed for user {current_user.user_id}")
    return {"message": "Password changed successfully"}
