from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SellerRegisterRequest(BaseModel):
    seller_name: str = Field(..., min_length=1, max_length=100)
    store_bio: Optional[str] = None


class SellerResponse(BaseModel):
    seller_id: int
    seller_name: str
    store_bio: Optional[str] = None
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
