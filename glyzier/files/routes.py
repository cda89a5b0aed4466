from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from sqlalchemy.orm import Session
from typing import Optional
from ..core.database import get_db
from ..auth.authentication import get_current_user
from ..user.models import User
from .schemas import StoredFileResponse, ProductFilesResponse, DownloadResponse
from . import crud

router = APIRouter(prefix="/files", tags=["Files"])


def _raise_http(e: Exception):
    if isinstance(e, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, LookupError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/upload/{product_id}", response_model=StoredFileResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    product_id: int,
    file_type: Optional[str] = None,
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        product_file = await crud.upload_product_file(db, product_id, current_user, file, file_type)
    except (ValueError, LookupError, PermissionError) as e:
        _raise_http(e)
    return crud.to_file_response(product_file)


@router.get("/product/{product_id}", response_model=ProductFilesResponse)
async def get_product_files(product_id: int, db: Session = Depends(get_db)):
    files = crud.get_product_files(db, product_id)
    return {"product_id": product_id, "files": [crud.to_file_response(f) for f in files]}


@router.get("/product/{product_id}/type/{file_type}", response_model=ProductFilesResponse)
async def get_product_files_by_type(product_id: int, file_type: str, db: Session = Depends(get_db)):
    try:
        files = crud.get_product_files(db, product_id, file_type)
    except ValueError as e:
        _raise_http(e)
    return {"product_id": product_id, "files": [crud.to_file_response(f) for f in files]}


@router.get("/download/{file_id}", response_model=DownloadResponse)
async def get_download_url(file_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return crud.get_download(db, file_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)


@router.delete("/{file_id}", response_model=dict)
async def delete_file(file_id: int, current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        await crud.delete_product_file(db, file_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)
    return {"message": "File deleted successfully"}
