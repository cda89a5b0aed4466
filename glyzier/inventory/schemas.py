from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class InventoryUpdate(BaseModel):
    # -1 marks unlimited stock
    qty_on_hand: int = Field(..., ge=-1)


class InventoryResponse(BaseModel):
    inventory_id: int
    product_id: int
    qty_on_hand: int
    qty_reserved: int
    available_quantity: Optional[int] = None
    in_stock: bool
    is_unlimited: bool
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
