from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow


class Seller(Base):
    __tablename__ = "sellers"
    seller_id = Column(Integer, primary_key=True, index=True)
    seller_name = Column(String(100), nullable=False)
    store_bio = Column(Text)
    user_id = Column(Integer, ForeignKey("users.user_id"), unique=True, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow)

    user = relationship("User", back_populates="seller")
    products = relationship("Product", back_populates="seller", cascade="all, delete-orphan")
