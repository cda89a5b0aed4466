from sqlalchemy.orm import Session
from typing import Optional, List, Tuple
from .models import Favorite
from ..product.models import Product
from ..user.models import User


def get_favorite(db: Session, user_id: int, product_id: int) -> Optional[Favorite]:
    return db.query(Favorite).filter(Favorite.user_id == user_id, Favorite.product_id == product_id).first()


def get_favorites(db: Session, user: User) -> List[Favorite]:
    return db.query(Favorite).filter(Favorite.user_id == user.user_id) \
        .order_by(Favorite.favorited_at.desc(), Favorite.favorite_id.desc()).all()


def add_favorite(db: Session, user: User, product_id: int) -> Tuple[Favorite, bool]:
    """
    Favorite a product for the user.

    Adding the same product twice is not an error: the existing row is
    returned unchanged.

    Returns:
        Tuple[Favorite, bool]: the favorite and whether it was newly created
    """
    if not db.query(Product).filter(Product.product_id == product_id).first():
        raise LookupError("Product not found")

    existing = get_favorite(db, user.user_id, product_id)
    if existing:
        return existing, False

    favorite = Favorite(user_id=user.user_id, product_id=product_id)
    db.add(favorite)
    db.commit()
    db.refresh(favorite)
    return favorite, True


def remove_favorite(db: Session, user: User, product_id: int) -> None:
    favorite = get_favorite(db, user.user_id, product_id)
    if not favorite:
        raise LookupError("Product is not in favorites")
    db.delete(favorite)
    db.commit()


def is_favorited(db: Session, user: User, product_id: int) -> bool:
    return get_favorite(db, user.user_id, product_id) is not None


def count_favorites(db: Session, user: User) -> int:
    return db.query(Favorite).filter(Favorite.user_id == user.user_id).count()


def to_favorite_response(favorite: Favorite) -> dict:
    product = favorite.product
    return {
        "favorite_id": favorite.favorite_id,
        "product_id": product.product_id,
        "product_name": product.product_name,
        "product_type": product.type,
        "price": float(product.price),
        "product_status": product.status,
        "screenshot_preview_url": product.screenshot_preview_url,
        "seller_name": product.seller.seller_name if product.seller else None,
        "favorited_at": favorite.favorited_at,
    }
