from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from ..product.schemas import ProductResponse


class DashboardStats(BaseModel):
    total_users: int
    total_products: int
    total_orders: int
    total_revenue: float


class AdminUserResponse(BaseModel):
    user_id: int
    email: str
    display_name: Optional[str] = None
    phone_number: Optional[str] = None
    status: str
    is_admin: bool
    created_at: Optional[datetime] = None
    seller_id: Optional[int] = None
    shop_name: Optional[str] = None


class AdminProductResponse(ProductResponse):
    seller_email: Optional[str] = None
