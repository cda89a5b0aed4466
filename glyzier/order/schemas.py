from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int


class PlaceOrderRequest(BaseModel):
    items: List[OrderItemRequest] = []
    address: Optional[str] = None
    card_number: Optional[str] = None


class PlaceOrderFromCartRequest(BaseModel):
    address: Optional[str] = None
    card_number: Optional[str] = None


class UpdateOrderStatusRequest(BaseModel):
    status: Optional[str] = None


class OrderItemResponse(BaseModel):
    order_product_id: int
    product_id: int
    product_name: str
    unit_price: float
    quantity: int
    line_total: float


class OrderResponse(BaseModel):
    order_id: int
    user_id: int
    total: float
    status: str
    delivery_address: Optional[str] = None
    card_last4: Optional[str] = None
    placed_at: Optional[datetime] = None
    items: Optional[List[OrderItemResponse]] = None
