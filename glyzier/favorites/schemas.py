from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class FavoriteResponse(BaseModel):
    favorite_id: int
    product_id: int
    product_name: str
    product_type: Optional[str] = None
    price: float
    product_status: str
    screenshot_preview_url: Optional[str] = None
    seller_name: Optional[str] = None
    favorited_at: Optional[datetime] = None
