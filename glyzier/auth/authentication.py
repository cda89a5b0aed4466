from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional
from sqlalchemy.orm import Session
from ..core import config
from ..core.database import get_db
from ..core.security import decode_access_token
from ..user.models import User
import logging

# OAuth2 scheme for token extraction; login itself takes a JSON body
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{config.API_PREFIX.lstrip('/')}/auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{config.API_PREFIX.lstrip('/')}/auth/token", auto_error=False)

logger = logging.getLogger(__name__)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_user_from_token(token: str, db: Session) -> User:
    """
    Turn a bearer token into an active user.

    Args:
        token: JWT from the Authorization header
        db: Database session

    Returns:
        User: the authenticated user

    Raises:
        HTTPException: 401 for a bad token or unknown user, 403 for a banned account
    """
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.info(f"JWT token parsing failed: {str(e)}")
        raise _credentials_exception()

    email = payload.get("sub")
    if not email:
        raise _credentials_exception()

    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if user is None:
        raise _credentials_exception()

    if user.is_banned:
        logger.warning(f"Banned user {user.email} attempted to use a token")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account has been banned"
        )
    return user


async def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    return resolve_user_from_token(token, db)


async def get_current_user_optional(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Current user when a valid token is sent, otherwise None."""
    if not token:
        return None
    try:
        return resolve_user_from_token(token, db)
    except HTTPException:
        return None


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        logger.warning(f"User {current_user.user_id} ({current_user.email}) tried to access an admin endpoint")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admin users can access this endpoint"
        )
    return current_user
