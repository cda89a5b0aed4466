from sqlalchemy import Column, Integer, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from ..core.database import Base, utcnow

UNLIMITED_STOCK = -1


class Inventory(Base):
    """
    Stock record of a product.

    qty_on_hand == -1 marks unlimited (digital) stock; available quantity is
    on hand minus reserved otherwise.
    """
    __tablename__ = "inventory"
    inventory_id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), unique=True, nullable=False)
    qty_on_hand = Column(Integer, nullable=False, default=0)
    qty_reserved = Column(Integer, nullable=False, default=0)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    product = relationship("Product", back_populates="inventory")

    @property
    def is_unlimited(self) -> bool:
        return self.qty_on_hand == UNLIMITED_STOCK

    @property
    def available_quantity(self):
        """None means unbounded."""
        if self.is_unlimited:
            return None
        return (self.qty_on_hand or 0) - (self.qty_reserved or 0)

    @property
    def in_stock(self) -> bool:
        return self.is_unlimited or self.available_quantity > 0

    def can_supply(self, quantity: int) -> bool:
        return self.is_unlimited or self.available_quantity >= quantity

    def reserve(self, quantity: int) -> bool:
        if self.is_unlimited:
            return True
        if self.available_quantity >= quantity:
            self.qty_reserved = (self.qty_reserved or 0) + quantity
            return True
        return False

    def release(self, quantity: int) -> None:
        self.qty_reserved = max(0, (self.qty_reserved or 0) - quantity)

    def fulfill(self, quantity: int) -> None:
        if self.is_unlimited:
            return
        self.qty_reserved = max(0, (self.qty_reserved or 0) - quantity)
        self.qty_on_hand = max(0, self.qty_on_hand - quantity)

    def decrement(self, quantity: int) -> None:
        if self.is_unlimited:
            return
        self.qty_on_hand = self.qty_on_hand - quantity
