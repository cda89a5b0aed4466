from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class RegisterRequest(BaseModel):
    email: EmailStr
    display_name: Optional[str] = Field(None, max_length=100)
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class UserSummary(BaseModel):
    user_id: int
    email: str
    display_name: Optional[str] = None
    is_seller: bool = False
    is_admin: bool = False


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSummary


class ForgotPasswordRequest(BaseModel):
    email: str


class ResetPasswordRequest(BaseModel):
    email: str
    code: str
    new_password: str
