from sqlalchemy.orm import Session
from typing import Optional, List
from .models import User
from .schemas import UpdateProfileRequest, ChangePasswordRequest
from ..core.security import hash_password, verify_password

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def validate_password(password: Optional[str]) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """
    Look a user up by email, case-insensitively.

    Emails are stored lower-cased, so the lookup normalises its argument the
    same way.
    """
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.user_id).all()


def create_user(db: Session, email: str, password: str, display_name: Optional[str] = None,
                is_admin: bool = False) -> User:
    """
    Create a user account.

    Args:
        db (Session): database session
        email (str): login email, stored lower-cased
        password (str): plain password, stored as a bcrypt hash
        display_name (str, optional): public name
        is_admin (bool): admin flag

    Returns:
        User: the persisted user

    Raises:
        ValueError: when the email is taken or the password is too short
    """
    email = normalize_email(email)
    if get_user_by_email(db, email):
        raise ValueError("Email already registered")
    validate_password(password)

    db_user = User(
        email=email,
        password=hash_password(password),
        display_name=display_name,
        is_admin=is_admin
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_profile(db: Session, user: User, profile: UpdateProfileRequest) -> User:
    user.display_name = profile.display_name
    # Phone number is optional; an empty value clears it
    user.phone_number = profile.phone_number or None
    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, user: User, request: ChangePasswordRequest) -> None:
    if not verify_password(request.current_password, user.password):
        raise ValueError("Current password is incorrect")
    if request.new_password != request.confirm_password:
        raise ValueError("New password and confirmation do not match")
    validate_password(request.new_password)

    user.password = hash_password(request.new_password)
    db.commit()


def set_password(db: Session, user: User, new_password: str) -> None:
    validate_password(new_password)
    user.password = hash_password(new_password)
    db.commit()


def to_user_response(user: User) -> dict:
    seller = user.seller
    return {
        "user_id": user.user_id,
        "email": user.email,
        "display_name": user.display_name,
        "phone_number": user.phone_number,
        "is_admin": bool(user.is_admin),
        "status": user.status,
        "created_at": user.created_at,
        "is_seller": seller is not None,
        "seller_id": seller.seller_id if seller else None,
    }
