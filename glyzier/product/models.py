from sqlalchemy import Column, Integer, String, Text, ForeignKey, DECIMAL, TIMESTAMP
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow

PRODUCT_STATUS_ACTIVE = "ACTIVE"
PRODUCT_STATUS_DELETED = "DELETED"


class Product(Base):
    __tablename__ = "products"
    product_id = Column(Integer, primary_key=True, index=True)
    product_name = Column(String(200), nullable=False, index=True)
    type = Column(String(50))
    price = Column(DECIMAL(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=PRODUCT_STATUS_ACTIVE)
    description = Column(Text)
    screenshot_preview_url = Column(String(2048))
    seller_id = Column(Integer, ForeignKey("sellers.seller_id"), nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow)

    seller = relationship("Seller", back_populates="products")
    files = relationship("ProductFile", back_populates="product", cascade="all, delete-orphan",
                         order_by="ProductFile.file_id")
    inventory = relationship("Inventory", back_populates="product", uselist=False, cascade="all, delete-orphan")

    @property
    def is_active(self) -> bool:
        return (self.status or "").upper() == PRODUCT_STATUS_ACTIVE


class ProductFile(Base):
    __tablename__ = "product_files"
    file_id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)
    file_key = Column(String(1024), nullable=False)
    file_type = Column(String(50))
    file_format = Column(String(20))
    created_at = Column(TIMESTAMP, default=utcnow)

    product = relationship("Product", back_populates="files")
