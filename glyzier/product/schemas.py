from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class ProductCreate(BaseModel):
    product_name: str = Field(..., min_length=3, max_length=200)
    type: Optional[str] = Field(None, max_length=50)
    price: float = Field(..., ge=0.01)
    status: Optional[str] = None
    description: Optional[str] = None
    screenshot_preview_url: Optional[str] = None
    file_keys: Optional[List[str]] = None


class ProductUpdate(BaseModel):
    product_name: Optional[str] = Field(None, min_length=3, max_length=200)
    type: Optional[str] = Field(None, max_length=50)
    price: Optional[float] = Field(None, ge=0.01)
    status: Optional[str] = None
    description: Optional[str] = None
    screenshot_preview_url: Optional[str] = None
    # When given, replaces every product_image file of the product
    file_keys: Optional[List[str]] = None


class ProductFileResponse(BaseModel):
    file_id: int
    file_key: str
    file_type: Optional[str] = None
    file_format: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[datetime] = None


class ProductResponse(BaseModel):
    product_id: int
    product_name: str
    type: Optional[str] = None
    price: float
    status: str
    description: Optional[str] = None
    screenshot_preview_url: Optional[str] = None
    created_at: Optional[datetime] = None
    seller_id: int
    seller_name: Optional[str] = None
    qty_on_hand: int = 0
    qty_reserved: int = 0
    available_quantity: Optional[int] = 0
    in_stock: bool = False
    is_unlimited: bool = False
    files: List[ProductFileResponse] = []


class ProductPage(BaseModel):
    products: List[ProductResponse]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    has_next: bool
    has_prev: bool


class ProductSearchResponse(BaseModel):
    products: List[ProductResponse]
    count: int
    query: str
    category: Optional[str] = None
