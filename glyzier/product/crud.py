from sqlalchemy.orm import Session
from sqlalchemy import func
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, List, Tuple
from .models import Product, ProductFile, PRODUCT_STATUS_ACTIVE, PRODUCT_STATUS_DELETED
from .schemas import ProductCreate, ProductUpdate
from ..seller.models import Seller
from ..user.models import User
from ..inventory import crud as inventory_crud
from ..core import cloudinary_utils
import logging

logger = logging.getLogger(__name__)

PRODUCT_STATUSES = (PRODUCT_STATUS_ACTIVE, PRODUCT_STATUS_DELETED)
CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def normalize_status(value: Optional[str]) -> str:
    status = (value or PRODUCT_STATUS_ACTIVE).strip().upper()
    if status not in PRODUCT_STATUSES:
        raise ValueError(f"Invalid product status: {value}")
    return status


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.product_id == product_id).first()


def require_product(db: Session, product_id: int) -> Product:
    product = get_product(db, product_id)
    if not product:
        raise LookupError("Product not found")
    return product


def require_owned_product(db: Session, product_id: int, user: User, action: str = "update") -> Product:
    """
    Load a product and check that the user is the seller who owns it.

    Raises:
        LookupError: product does not exist
        PermissionError: the user does not own the product
    """
    product = require_product(db, product_id)
    if product.seller is None or product.seller.user_id != user.user_id:
        logger.warning(f"User {user.user_id} denied {action} on product {product_id}")
        raise PermissionError(f"You do not have permission to {action} this product")
    return product


def _image_files(file_keys: List[str]) -> List[ProductFile]:
    return [
        ProductFile(
            file_key=key,
            file_type=cloudinary_utils.FILE_TYPE_PRODUCT_IMAGE,
            file_format=cloudinary_utils.extract_file_format(key)
        )
        for key in file_keys if key and key.strip()
    ]


def create_product(db: Session, user: User, data: ProductCreate) -> Product:
    seller = db.query(Seller).filter(Seller.user_id == user.user_id).first()
    if not seller:
        raise PermissionError("Only sellers can create products")

    product = Product(
        product_name=data.product_name.strip(),
        type=data.type,
        price=to_money(data.price),
        status=normalize_status(data.status),
        description=data.description,
        screenshot_preview_url=data.screenshot_preview_url,
        seller_id=seller.seller_id
    )
    product.files = _image_files(data.file_keys or [])
    db.add(product)
    db.flush()
    inventory_crud.create_inventory(db, product.product_id)
    db.commit()
    db.refresh(product)
    logger.info(f"Seller {seller.seller_id} created product {product.product_id}")
    return product


def update_product(db: Session, product_id: int, user: User, data: ProductUpdate) -> Product:
    product = require_owned_product(db, product_id, user, "update")

    if data.product_name is not None:
        product.product_name = data.product_name.strip()
    if data.type is not None:
        product.type = data.type
    if data.price is not None:
        product.price = to_money(data.price)
    if data.status is not None:
        product.status = normalize_status(data.status)
    if data.description is not None:
        product.description = data.description
    if data.screenshot_preview_url is not None:
        product.screenshot_preview_url = data.screenshot_preview_url
    if data.file_keys is not None:
        others = [f for f in product.files if f.file_type != cloudinary_utils.FILE_TYPE_PRODUCT_IMAGE]
        product.files = others + _image_files(data.file_keys)

    db.commit()
    db.refresh(product)
    return product


def soft_delete_product(db: Session, product: Product) -> Product:
    product.status = PRODUCT_STATUS_DELETED
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product_id: int, user: User) -> Product:
    product = require_owned_product(db, product_id, user, "delete")
    logger.info(f"Product {product_id} soft deleted by owner {user.user_id}")
    return soft_delete_product(db, product)


def restore_product(db: Session, product: Product) -> Product:
    product.status = PRODUCT_STATUS_ACTIVE
    db.commit()
    db.refresh(product)
    return product


def update_inventory(db: Session, product_id: int, user: User, qty_on_hand: int):
    require_owned_product(db, product_id, user, "manage inventory for")
    return inventory_crud.set_stock(db, product_id, qty_on_hand)


def get_active_products_page(db: Session, page: int, size: int) -> Tuple[List[Product], int]:
    """ACTIVE products newest first, one zero-based page at a time."""
    query = db.query(Product).filter(Product.status == PRODUCT_STATUS_ACTIVE)
    total = query.count()
    products = query.order_by(Product.created_at.desc(), Product.product_id.desc()) \
        .offset(page * size).limit(size).all()
    return products, total


def get_products_by_seller(db: Session, seller_id: int) -> List[Product]:
    if not db.query(Seller).filter(Seller.seller_id == seller_id).first():
        raise LookupError("Seller not found")
    return db.query(Product).filter(
        Product.seller_id == seller_id,
        Product.status != PRODUCT_STATUS_DELETED
    ).order_by(Product.created_at.desc(), Product.product_id.desc()).all()


def search_products(db: Session, query: str, category: Optional[str] = None) -> List[Product]:
    if not query or not query.strip():
        raise ValueError("Search query must not be empty")

    term = query.strip().lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{term}%"
    q = db.query(Product).filter(
        Product.status == PRODUCT_STATUS_ACTIVE,
        func.lower(Product.product_name).like(pattern, escape="\\")
    )
    if category and category.strip():
        q = q.filter(func.lower(Product.type) == category.strip().lower())
    return q.order_by(Product.created_at.desc(), Product.product_id.desc()).all()


def get_all_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.product_id).all()


def to_file_response(product_file: ProductFile) -> dict:
    return {
        "file_id": product_file.file_id,
        "file_key": product_file.file_key,
        "file_type": product_file.file_type,
        "file_format": product_file.file_format,
        "url": cloudinary_utils.get_public_url(
            product_file.file_key, product_file.file_type, product_file.file_format
        ),
        "created_at": product_file.created_at,
    }


def to_product_response(product: Product) -> dict:
    inventory = product.inventory
    seller = product.seller
    data = {
        "product_id": product.product_id,
        "product_name": product.product_name,
        "type": product.type,
        "price": float(product.price),
        "status": product.status,
        "description": product.description,
        "screenshot_preview_url": product.screenshot_preview_url,
        "created_at": product.created_at,
        "seller_id": product.seller_id,
        "seller_name": seller.seller_name if seller else None,
        "files": [to_file_response(f) for f in product.files],
    }
    if inventory is not None:
        data.update({
            "qty_on_hand": inventory.qty_on_hand,
            "qty_reserved": inventory.qty_reserved or 0,
            "available_quantity": inventory.available_quantity,
            "in_stock": inventory.in_stock,
            "is_unlimited": inventory.is_unlimited,
        })
    return data
