from sqlalchemy.orm import Session
from typing import Optional, List
from .models import Inventory, UNLIMITED_STOCK


def create_inventory(db: Session, product_id: int, qty_on_hand: int = 0) -> Inventory:
    """Add an empty stock record for a new product; the caller commits."""
    inventory = Inventory(product_id=product_id, qty_on_hand=qty_on_hand, qty_reserved=0)
    db.add(inventory)
    return inventory


def get_inventory_by_product(db: Session, product_id: int) -> Optional[Inventory]:
    return db.query(Inventory).filter(Inventory.product_id == product_id).first()


def lock_inventory_rows(db: Session, product_ids: List[int]) -> dict:
    """
    Load the stock rows of several products with SELECT ... FOR UPDATE.

    Rows are locked in product id order so concurrent checkouts take locks in
    the same sequence. Rows already in the session are refreshed from the
    locked read. The lock lasts until the surrounding transaction ends;
    SQLite ignores it.

    Returns:
        dict: product_id -> Inventory
    """
    if not product_ids:
        return {}
    rows = db.query(Inventory).filter(
        Inventory.product_id.in_(sorted(set(product_ids)))
    ).order_by(Inventory.product_id).with_for_update().populate_existing().all()
    return {row.product_id: row for row in rows}


def set_stock(db: Session, product_id: int, qty_on_hand: int) -> Inventory:
    """
    Set the on-hand quantity of a product, creating its stock record if needed.

    Raises:
        ValueError: quantity below the unlimited sentinel
    """
    if qty_on_hand < UNLIMITED_STOCK:
        raise ValueError("Quantity must be -1 (unlimited) or greater")

    inventory = get_inventory_by_product(db, product_id)
    if inventory is None:
        inventory = create_inventory(db, product_id, qty_on_hand)
    else:
        inventory.qty_on_hand = qty_on_hand
    db.commit()
    db.refresh(inventory)
    return inventory
