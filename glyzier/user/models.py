from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow

USER_STATUS_ACTIVE = "ACTIVE"
USER_STATUS_BANNED = "BANNED"


class User(Base):
    __tablename__ = "users"
    user_id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    display_name = Column(String(100))
    phone_number = Column(String(20))
    is_admin = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default=USER_STATUS_ACTIVE)
    created_at = Column(TIMESTAMP, default=utcnow)

    seller = relationship("Seller", back_populates="user", uselist=False)

    @property
    def is_banned(self) -> bool:
        return self.status == USER_STATUS_BANNED

    @property
    def is_seller(self) -> bool:
        return self.seller is not None
