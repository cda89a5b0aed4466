from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List
from ..user.models import User, USER_STATUS_ACTIVE, USER_STATUS_BANNED
from ..product.models import Product, PRODUCT_STATUS_ACTIVE
from ..order.models import Order
from ..product import crud as product_crud
import logging

logger = logging.getLogger(__name__)


def get_dashboard_stats(db: Session) -> dict:
    """
    Headline figures for the admin dashboard.

    Only ACTIVE products are counted; revenue is the sum of every order total
    regardless of status.
    """
    total_revenue = db.query(func.coalesce(func.sum(Order.total), 0)).scalar()
    return {
        "total_users": db.query(User).count(),
        "total_products": db.query(Product).filter(Product.status == PRODUCT_STATUS_ACTIVE).count(),
        "total_orders": db.query(Order).count(),
        "total_revenue": float(total_revenue or 0),
    }


def require_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise LookupError("User not found")
    return user


def ban_user(db: Session, user_id: int, admin: User) -> User:
    user = require_user(db, user_id)
    if user.user_id == admin.user_id:
        raise ValueError("You cannot ban yourself")
    user.status = USER_STATUS_BANNED
    db.commit()
    db.refresh(user)
    logger.info(f"Admin {admin.user_id} banned user {user_id}")
    return user


def unban_user(db: Session, user_id: int, admin: User) -> User:
    user = require_user(db, user_id)
    user.status = USER_STATUS_ACTIVE
    db.commit()
    db.refresh(user)
    logger.info(f"Admin {admin.user_id} unbanned user {user_id}")
    return user


def remove_product(db: Session, product_id: int, admin: User) -> Product:
    product = product_crud.require_product(db, product_id)
    logger.info(f"Admin {admin.user_id} removed product {product_id}")
    return product_crud.soft_delete_product(db, product)


def restore_product(db: Session, product_id: int, admin: User) -> Product:
    product = product_crud.require_product(db, product_id)
    logger.info(f"Admin {admin.user_id} restored product {product_id}")
    return product_crud.restore_product(db, product)


def to_admin_user_response(user: User) -> dict:
    seller = user.seller
    return {
        "user_id": user.user_id,
        "email": user.email,
        "display_name": user.display_name,
        "phone_number": user.phone_number,
        "status": user.status,
        "is_admin": bool(user.is_admin),
        "created_at": user.created_at,
        "seller_id": seller.seller_id if seller else None,
        "shop_name": seller.seller_name if seller else None,
    }


def to_admin_product_response(product: Product) -> dict:
    data = product_crud.to_product_response(product)
    data["seller_email"] = product.seller.user.email if product.seller and product.seller.user else None
    return data


def get_all_products(db: Session) -> List[dict]:
    return [to_admin_product_response(p) for p in product_crud.get_all_products(db)]
