from sqlalchemy.orm import Session
from typing import Optional, List
from .models import Seller
from ..user.models import User
import logging

logger = logging.getLogger(__name__)

NOT_A_SELLER = "User is not registered as a seller"


def get_seller(db: Session, seller_id: int) -> Optional[Seller]:
    return db.query(Seller).filter(Seller.seller_id == seller_id).first()


def get_seller_by_user(db: Session, user_id: int) -> Optional[Seller]:
    return db.query(Seller).filter(Seller.user_id == user_id).first()


def get_sellers(db: Session) -> List[Seller]:
    return db.query(Seller).order_by(Seller.seller_id).all()


def require_seller(db: Session, user: User) -> Seller:
    """Seller profile of the user, LookupError when there is none."""
    seller = get_seller_by_user(db, user.user_id)
    if not seller:
        raise LookupError(NOT_A_SELLER)
    return seller


def register_seller(db: Session, user: User, seller_name: str, store_bio: Optional[str] = None) -> Seller:
    if get_seller_by_user(db, user.user_id):
        raise ValueError("User is already registered as a seller")

    seller = Seller(seller_name=seller_name.strip(), store_bio=store_bio, user_id=user.user_id)
    db.add(seller)
    db.commit()
    db.refresh(seller)
    logger.info(f"User {user.user_id} registered as seller {seller.seller_id}")
    return seller
