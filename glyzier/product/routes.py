from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import json
import logging
from ..core.database import get_db
from ..core.cache import get_cache, set_cache
from ..core.invalidation_helpers import invalidate_product_cache
from ..auth.authentication import get_current_user
from ..user.models import User
from ..inventory.schemas import InventoryUpdate, InventoryResponse
from .schemas import ProductCreate, ProductUpdate, ProductResponse, ProductPage, ProductSearchResponse
from . import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def _raise_http(e: Exception):
    if isinstance(e, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, LookupError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        db_product = crud.create_product(db, current_user, product)
    except (ValueError, PermissionError) as e:
        _raise_http(e)
    await invalidate_product_cache()
    return crud.to_product_response(db_product)


@router.get("", response_model=ProductPage)
async def list_products(
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """
    Public catalogue of ACTIVE products, newest first.

    Pages are zero-based. Each page is cached until a product or its stock
    changes.
    """
    cache_key = f"products:page:{page}:size:{size}"
    cached_result = await get_cache(cache_key)
    if cached_result:
        return json.loads(cached_result)

    products, total = crud.get_active_products_page(db, page, size)
    total_pages = (total + size - 1) // size
    result = ProductPage(
        products=[crud.to_product_response(p) for p in products],
        total_items=total,
        total_pages=total_pages,
        current_page=page,
        page_size=size,
        has_next=page + 1 < total_pages,
        has_prev=page > 0
    ).model_dump(mode="json")

    await set_cache(cache_key, json.dumps(result), expire=300)
    return result


@router.get("/search", response_model=ProductSearchResponse)
async def search_products(
    query: str = "",
    category: Optional[str] = None,
    db: Session = Depends(get_db)
):
    try:
        products = crud.search_products(db, query, category)
    except ValueError as e:
        _raise_http(e)

    result = {
        "products": [crud.to_product_response(p) for p in products],
        "count": len(products),
        "query": query.strip(),
    }
    if category:
        result["category"] = category
    return result


@router.get("/seller/{seller_id}", response_model=List[ProductResponse])
async def get_products_by_seller(seller_id: int, db: Session = Depends(get_db)):
    try:
        products = crud.get_products_by_seller(db, seller_id)
    except LookupError as e:
        _raise_http(e)
    return [crud.to_product_response(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: Session = Depends(get_db)):
    product = crud.get_product(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return crud.to_product_response(product)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product: ProductUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        db_product = crud.update_product(db, product_id, current_user, product)
    except (ValueError, LookupError, PermissionError) as e:
        _raise_http(e)
    await invalidate_product_cache()
    return crud.to_product_response(db_product)


@router.delete("/{product_id}", response_model=dict)
async def delete_product(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        crud.delete_product(db, product_id, current_user)
    except (LookupError, PermissionError) as e:
        _raise_http(e)
    await invalidate_product_cache()
    return {"message": "Product deleted successfully", "product_id": product_id}


@router.post("/{product_id}/inventory", response_model=InventoryResponse)
async def update_inventory(
    product_id: int,
    inventory: InventoryUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        db_inventory = crud.update_inventory(db, product_id, current_user, inventory.qty_on_hand)
    except (ValueError, LookupError, PermissionError) as e:
        _raise_http(e)
    logger.info(f"Stock of product {product_id} set to {inventory.qty_on_hand}")
    await invalidate_product_cache()
    return db_inventory
