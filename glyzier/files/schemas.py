from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class StoredFileResponse(BaseModel):
    file_id: int
    product_id: int
    file_type: Optional[str] = None
    file_format: Optional[str] = None
    file_key: str
    url: Optional[str] = None
    created_at: Optional[datetime] = None


class ProductFilesResponse(BaseModel):
    product_id: int
    files: List[StoredFileResponse]


class DownloadResponse(BaseModel):
    download_url: str
    expires_in: int
    file_name: str
