from sqlalchemy.orm import Session
from fastapi import UploadFile
from typing import List, Optional
from ..product.models import ProductFile
from ..product import crud as product_crud
from ..order.models import Order, OrderProduct
from ..user.models import User
from ..core import cloudinary_utils, config
import logging

logger = logging.getLogger(__name__)


def validate_file_type(file_type: Optional[str]) -> str:
    file_type = (file_type or "").strip().lower()
    if file_type not in cloudinary_utils.FILE_TYPES:
        raise ValueError(f"Invalid file type: {file_type}")
    return file_type


def require_file(db: Session, file_id: int) -> ProductFile:
    product_file = db.query(ProductFile).filter(ProductFile.file_id == file_id).first()
    if not product_file:
        raise LookupError("File not found")
    return product_file


async def upload_product_file(db: Session, product_id: int, user: User, file: UploadFile,
                              file_type: Optional[str]) -> ProductFile:
    """
    Store an uploaded file for a product and record it.

    Only the seller who owns the product may upload. The asset goes to the
    storage folder of its file type; digital downloads are stored privately.

    Raises:
        ValueError: bad file type, disallowed content type, oversized file or
        failed upload
        LookupError: unknown product
        PermissionError: the user does not own the product
    """
    file_type = validate_file_type(file_type)
    product = product_crud.require_owned_product(db, product_id, user, "upload files for")

    uploaded = await cloudinary_utils.upload_file(file, file_type)
    product_file = ProductFile(
        product_id=product.product_id,
        file_key=uploaded["public_id"],
        file_type=file_type,
        file_format=(uploaded.get("format") or cloudinary_utils.extract_file_format(file.filename)).lower()
    )
    db.add(product_file)
    db.commit()
    db.refresh(product_file)
    logger.info(f"Stored {file_type} file {product_file.file_id} for product {product_id}")
    return product_file


def get_product_files(db: Session, product_id: int, file_type: Optional[str] = None) -> List[ProductFile]:
    query = db.query(ProductFile).filter(ProductFile.product_id == product_id)
    if file_type is not None:
        query = query.filter(ProductFile.file_type == validate_file_type(file_type))
    return query.order_by(ProductFile.file_id).all()


def has_purchased(db: Session, user_id: int, product_id: int) -> bool:
    return db.query(OrderProduct).join(Order, Order.order_id == OrderProduct.order_id).filter(
        Order.user_id == user_id,
        OrderProduct.product_id == product_id
    ).first() is not None


def get_download(db: Session, file_id: int, user: User) -> dict:
    product_file = require_file(db, file_id)
    product = product_file.product
    if not has_purchased(db, user.user_id, product.product_id):
        logger.warning(f"User {user.user_id} tried to download file {file_id} without purchasing")
        raise PermissionError("You must purchase this product to download it")

    expires_in = config.SIGNED_URL_EXPIRE_SECONDS
    return {
        "download_url": cloudinary_utils.generate_signed_url(
            product_file.file_key, product_file.file_type, product_file.file_format, expires_in
        ),
        "expires_in": expires_in,
        "file_name": f"{product.product_name} - Digital Download",
    }


async def delete_product_file(db: Session, file_id: int, user: User) -> None:
    product_file = require_file(db, file_id)
    product_crud.require_owned_product(db, product_file.product_id, user, "delete files for")

    result = await cloudinary_utils.delete_file(product_file.file_key, product_file.file_type, product_file.file_format)
    if result["status"] != "success":
        logger.warning(f"Storage did not confirm deletion of {product_file.file_key}: {result['result']}")
    db.delete(product_file)
    db.commit()
    logger.info(f"Deleted file {file_id} of product {product_file.product_id}")


def to_file_response(product_file: ProductFile) -> dict:
    data = product_crud.to_file_response(product_file)
    data["product_id"] = product_file.product_id
    return data
