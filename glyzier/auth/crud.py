import logging
import secrets
from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from ..core import config
from ..core.database import utcnow
from ..core.security import verify_password, create_access_token
from ..user.models import User
from ..user import crud as user_crud
from .models import PasswordResetCode

logger = logging.getLogger(__name__)


def build_auth_response(user: User) -> dict:
    return {
        "access_token": create_access_token(user.email),
        "token_type": "bearer",
        "user": {
            "user_id": user.user_id,
            "email": user.email,
            "display_name": user.display_name,
            "is_seller": user.is_seller,
            "is_admin": bool(user.is_admin),
        },
    }


def register(db: Session, email: str, password: str, display_name: Optional[str] = None) -> User:
    user = user_crud.create_user(db, email=email, password=password, display_name=display_name)
    logger.info(f"Registered user {user.user_id} ({user.email})")
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Check credentials for a login attempt.

    Raises:
        LookupError: unknown email or wrong password; both report the same message
        PermissionError: the account is banned
    """
    user = user_crud.get_user_by_email(db, email)
    if not user or not verify_password(password, user.password):
        logger.warning(f"Failed login attempt for {email}")
        raise LookupError("Invalid email or password")
    if user.is_banned:
        logger.warning(f"Banned user {user.email} attempted to log in")
        raise PermissionError("User account has been banned")
    return user


def generate_reset_code() -> str:
    return f"{secrets.randbelow(1_000_000):06d}"


def create_reset_code(db: Session, email: str) -> Tuple[User, str]:
    """
    Issue a fresh 6-digit reset code for an account.

    Earlier unused codes for the same email are marked used so only the newest
    code can succeed.
    """
    user = user_crud.get_user_by_email(db, email)
    if not user:
        raise ValueError("Email not found")

    db.query(PasswordResetCode).filter(
        PasswordResetCode.email == user.email,
        PasswordResetCode.used == False  # noqa: E712
    ).update({PasswordResetCode.used: True}, synchronize_session=False)

    now = utcnow()
    code = generate_reset_code()
    db.add(PasswordResetCode(
        email=user.email,
        code=code,
        created_at=now,
        expires_at=now + timedelta(minutes=config.RESET_CODE_EXPIRE_MINUTES),
        used=False
    ))
    db.commit()
    return user, code


def reset_password(db: Session, email: str, code: str, new_password: str) -> User:
    email = user_crud.normalize_email(email)
    latest = db.query(PasswordResetCode).filter(
        PasswordResetCode.email == email,
        PasswordResetCode.used == False,  # noqa: E712
        PasswordResetCode.expires_at > utcnow()
    ).order_by(PasswordResetCode.created_at.desc(), PasswordResetCode.id.desc()).first()

    if not latest:
        raise ValueError("Invalid or expired reset code")
    if latest.code != (code or "").strip():
        raise ValueError("Invalid reset code")

    user = user_crud.get_user_by_email(db, email)
    if not user:
        raise ValueError("Email not found")

    user_crud.validate_password(new_password)
    db.query(PasswordResetCode).filter(
        PasswordResetCode.email == email
    ).update({PasswordResetCode.used: True}, synchronize_session=False)
    user_crud.set_password(db, user, new_password)
    logger.info(f"Password reset completed for user {user.user_id}")
    return user
