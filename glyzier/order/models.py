from sqlalchemy import Column, Integer, String, ForeignKey, DECIMAL, TIMESTAMP
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow

ORDER_STATUS_PENDING = "Pending"
ORDER_STATUS_PROCESSING = "Processing"
ORDER_STATUS_SHIPPED = "Shipped"
ORDER_STATUS_DELIVERED = "Delivered"
ORDER_STATUS_CANCELLED = "Cancelled"
ORDER_STATUSES = (
    ORDER_STATUS_PENDING,
    ORDER_STATUS_PROCESSING,
    ORDER_STATUS_SHIPPED,
    ORDER_STATUS_DELIVERED,
    ORDER_STATUS_CANCELLED,
)


class Order(Base):
    __tablename__ = "orders"
    order_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    total = Column(DECIMAL(10, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default=ORDER_STATUS_PENDING)
    delivery_address = Column(String(500))
    card_last4 = Column(String(4))
    placed_at = Column(TIMESTAMP, default=utcnow)

    user = relationship("User")
    items = relationship("OrderProduct", back_populates="order", cascade="all, delete-orphan",
                         order_by="OrderProduct.order_product_id")


class OrderProduct(Base):
    __tablename__ = "order_products"
    order_product_id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)
    product_name_snapshot = Column(String(200), nullable=False)
    unit_price = Column(DECIMAL(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    @property
    def line_total(self):
        return self.unit_price * self.quantity
