from sqlalchemy import Column, Integer, ForeignKey, DECIMAL, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow


class Cart(Base):
    __tablename__ = "carts"
    cart_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), unique=True, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    user = relationship("User")
    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan",
                         order_by="CartItem.cart_item_id")


class CartItem(Base):
    __tablename__ = "cart_items"
    __table_args__ = (UniqueConstraint("cart_id", "product_id", name="uq_cart_items_cart_product"),)
    cart_item_id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.cart_id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price_snapshot = Column(DECIMAL(10, 2), nullable=False)
    added_at = Column(TIMESTAMP, default=utcnow)

    cart = relationship("Cart", back_populates="items")
    product = relationship("Product")

    @property
    def line_total(self):
        return self.price_snapshot * self.quantity
