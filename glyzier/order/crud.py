from sqlalchemy.orm import Session
from decimal import Decimal
from typing import Optional, List, Tuple
from .models import Order, OrderProduct, ORDER_STATUSES, ORDER_STATUS_PENDING, ORDER_STATUS_CANCELLED
from ..product.models import Product
from ..seller.models import Seller
from ..user.models import User
from ..inventory import crud as inventory_crud
from ..cart import crud as cart_crud
import logging
import re

logger = logging.getLogger(__name__)

CARD_NUMBER_PATTERN = re.compile(r"^\d{16}$")


def _checkout_details(address: Optional[str], card_number: Optional[str]) -> Tuple[str, str]:
    """Validate the delivery address and card number; returns (address, last 4 digits)."""
    if not address or not address.strip():
        raise ValueError("Delivery address is required")
    card = re.sub(r"[\s-]", "", card_number or "")
    if not CARD_NUMBER_PATTERN.match(card):
        raise ValueError("Card number must be 16 digits")
    return address.strip(), card[-4:]


def _create_order(db: Session, user: User, lines: List[Tuple[int, int, Optional[Decimal]]],
                  address: Optional[str], card_number: Optional[str], from_cart: bool = False) -> Order:
    """
    Build an order from (product_id, quantity, unit_price) lines in one transaction.

    A unit_price of None means the product's current price. Stock rows are
    locked before they are checked and decremented; any failure rolls back the
    order together with every stock change, and the cart is only cleared when
    the whole order commits.
    """
    if not lines:
        raise ValueError("Order must contain at least one item")
    delivery_address, card_last4 = _checkout_details(address, card_number)

    try:
        inventories = inventory_crud.lock_inventory_rows(db, [product_id for product_id, _, _ in lines])
        order = Order(
            user_id=user.user_id,
            status=ORDER_STATUS_PENDING,
            delivery_address=delivery_address,
            card_last4=card_last4
        )
        total = Decimal("0")

        for product_id, quantity, unit_price in lines:
            if quantity is None or quantity <= 0:
                raise ValueError("Quantity must be greater than 0")
            product = db.query(Product).filter(Product.product_id == product_id).first()
            if not product:
                raise LookupError(f"Product not found with ID: {product_id}")
            if not product.is_active:
                raise ValueError(f"Product '{product.product_name}' is not available for purchase")
            inventory = inventories.get(product_id)
            if inventory is None:
                raise ValueError(f"Inventory not found for product '{product.product_name}'")
            if not inventory.can_supply(quantity):
                raise ValueError(
                    f"Insufficient stock for '{product.product_name}'. "
                    f"Available: {inventory.available_quantity}, requested: {quantity}"
                )

            inventory.decrement(quantity)
            price = unit_price if unit_price is not None else product.price
            order.items.append(OrderProduct(
                product_id=product.product_id,
                product_name_snapshot=product.product_name,
                unit_price=price,
                quantity=quantity
            ))
            total += Decimal(price) * quantity

        order.total = total
        db.add(order)
        if from_cart:
            cart_crud.clear_cart(db, user, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(order)
    logger.info(f"User {user.user_id} placed order {order.order_id} with {len(lines)} line(s), total {order.total}")
    return order


def place_order(db: Session, user: User, items: list, address: Optional[str], card_number: Optional[str]) -> Order:
    lines = [(item.product_id, item.quantity, None) for item in items or []]
    return _create_order(db, user, lines, address, card_number)


def place_order_from_cart(db: Session, user: User, address: Optional[str], card_number: Optional[str]) -> Order:
    """Turn the cart into an order at its snapshot prices, then empty the cart."""
    cart = cart_crud.validate_cart_for_checkout(db, user)
    lines = [(item.product_id, item.quantity, item.price_snapshot) for item in cart.items]
    return _create_order(db, user, lines, address, card_number, from_cart=True)


def get_order(db: Session, order_id: int) -> Optional[Order]:
    return db.query(Order).filter(Order.order_id == order_id).first()


def get_user_orders(db: Session, user_id: int) -> List[Order]:
    return db.query(Order).filter(Order.user_id == user_id) \
        .order_by(Order.placed_at.desc(), Order.order_id.desc()).all()


def get_order_for_user(db: Session, order_id: int, user: User) -> Order:
    order = get_order(db, order_id)
    if not order:
        raise LookupError("Order not found")
    if order.user_id != user.user_id:
        raise PermissionError("You do not have permission to view this order")
    return order


def get_seller_orders(db: Session, seller: Seller) -> List[Tuple[Order, List[OrderProduct]]]:
    """Orders containing the seller's products, each paired with only those lines."""
    orders = db.query(Order).join(OrderProduct, Order.order_id == OrderProduct.order_id) \
        .join(Product, OrderProduct.product_id == Product.product_id) \
        .filter(Product.seller_id == seller.seller_id) \
        .distinct().order_by(Order.placed_at.desc(), Order.order_id.desc()).all()
    return [
        (order, [item for item in order.items if item.product.seller_id == seller.seller_id])
        for order in orders
    ]


def update_order_status(db: Session, order_id: int, user: User, new_status: Optional[str]) -> Order:
    """
    Change the status of an order.

    Admins and sellers with products in the order may set any known status.
    The buyer may only cancel while the order is still Pending.

    Raises:
        ValueError: missing or unknown status
        LookupError: order does not exist
        PermissionError: the user may not make this change
    """
    if not new_status or not new_status.strip():
        raise ValueError("Status is required")
    matches = [s for s in ORDER_STATUSES if s.lower() == new_status.strip().lower()]
    if not matches:
        raise ValueError(f"Invalid order status: {new_status}. Allowed: {', '.join(ORDER_STATUSES)}")
    target = matches[0]

    order = get_order(db, order_id)
    if not order:
        raise LookupError("Order not found")

    seller = db.query(Seller).filter(Seller.user_id == user.user_id).first()
    is_order_seller = seller is not None and any(
        item.product.seller_id == seller.seller_id for item in order.items
    )
    is_buyer_cancel = (
        order.user_id == user.user_id
        and target == ORDER_STATUS_CANCELLED
        and order.status == ORDER_STATUS_PENDING
    )
    if not (user.is_admin or is_order_seller or is_buyer_cancel):
        logger.warning(f"User {user.user_id} denied status change of order {order_id} to {target}")
        raise PermissionError("You do not have permission to update this order")

    order.status = target
    db.commit()
    db.refresh(order)
    logger.info(f"Order {order_id} status set to {target} by user {user.user_id}")
    return order


def to_item_response(item: OrderProduct) -> dict:
    return {
        "order_product_id": item.order_product_id,
        "product_id": item.product_id,
        "product_name": item.product_name_snapshot,
        "unit_price": float(item.unit_price),
        "quantity": item.quantity,
        "line_total": float(item.line_total),
    }


def to_order_response(order: Order, items: Optional[List[OrderProduct]] = None, include_items: bool = True) -> dict:
    data = {
        "order_id": order.order_id,
        "user_id": order.user_id,
        "total": float(order.total),
        "status": order.status,
        "delivery_address": order.delivery_address,
        "card_last4": order.card_last4,
        "placed_at": order.placed_at,
        "items": None,
    }
    if include_items:
        data["items"] = [to_item_response(i) for i in (items if items is not None else order.items)]
    return data
