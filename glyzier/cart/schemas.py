from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class AddToCartRequest(BaseModel):
    product_id: int
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int


class CartItemResponse(BaseModel):
    cart_item_id: int
    product_id: int
    product_name: str
    product_type: Optional[str] = None
    product_status: str
    seller_name: Optional[str] = None
    screenshot_preview_url: Optional[str] = None
    quantity: int
    price_snapshot: float
    current_price: float
    line_total: float
    available_quantity: Optional[int] = None
    is_unlimited: bool = False
    added_at: Optional[datetime] = None


class CartResponse(BaseModel):
    cart_id: Optional[int] = None
    items: List[CartItemResponse] = []
    total_item_count: int = 0
    total_price: float = 0.0
    updated_at: Optional[datetime] = None
