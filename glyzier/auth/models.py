from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP
from ..core.database import Base, utcnow


class PasswordResetCode(Base):
    __tablename__ = "password_reset_codes"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    code = Column(String(6), nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    expires_at = Column(TIMESTAMP, nullable=False)
    used = Column(Boolean, nullable=False, default=False)
