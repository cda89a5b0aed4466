from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserResponse(BaseModel):
    user_id: int
    email: str
    display_name: Optional[str] = None
    phone_number: Optional[str] = None
    is_admin: bool = False
    status: str
    created_at: Optional[datetime] = None
    is_seller: bool = False
    seller_id: Optional[int] = None

    class Config:
        from_attributes = True


class UpdateProfileRequest(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str
    confirm_password: str
