from sqlalchemy.orm import Session
from decimal import Decimal
from typing import Optional
from .models import Cart, CartItem
from ..product.models import Product
from ..inventory.models import Inventory
from ..user.models import User
from ..core.database import utcnow
import logging

logger = logging.getLogger(__name__)


def get_cart(db: Session, user_id: int) -> Optional[Cart]:
    return db.query(Cart).filter(Cart.user_id == user_id).first()


def get_or_create_cart(db: Session, user: User) -> Cart:
    cart = get_cart(db, user.user_id)
    if cart is None:
        cart = Cart(user_id=user.user_id)
        db.add(cart)
        db.commit()
        db.refresh(cart)
    return cart


def _purchasable_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.product_id == product_id).first()
    if not product:
        raise LookupError("Product not found")
    if not product.is_active:
        raise ValueError(f"Product '{product.product_name}' is not available for purchase")
    return product


def _check_stock(product: Product, quantity: int) -> Inventory:
    inventory = product.inventory
    if inventory is None:
        raise ValueError(f"Inventory not found for product '{product.product_name}'")
    if not inventory.can_supply(quantity):
        raise ValueError(
            f"Insufficient stock for '{product.product_name}'. "
            f"Available: {inventory.available_quantity}, requested: {quantity}"
        )
    return inventory


def _get_item(cart: Cart, product_id: int) -> Optional[CartItem]:
    for item in cart.items:
        if item.product_id == product_id:
            return item
    return None


def add_to_cart(db: Session, user: User, product_id: int, quantity: int) -> Cart:
    """
    Add a product to the user's cart.

    An existing line for the product gets the quantities summed; the combined
    quantity must still fit the available stock. A new line snapshots the
    product's current price, which later price changes do not touch.

    Raises:
        ValueError: non-positive quantity, inactive product, missing inventory
        or not enough stock
        LookupError: unknown product
    """
    if quantity is None or quantity <= 0:
        raise ValueError("Quantity must be greater than 0")

    product = _purchasable_product(db, product_id)
    cart = get_or_create_cart(db, user)
    item = _get_item(cart, product_id)

    new_quantity = quantity + (item.quantity if item else 0)
    _check_stock(product, new_quantity)

    if item:
        item.quantity = new_quantity
    else:
        cart.items.append(CartItem(
            product_id=product.product_id,
            quantity=quantity,
            price_snapshot=product.price
        ))
    cart.updated_at = utcnow()
    db.commit()
    db.refresh(cart)
    logger.info(f"User {user.user_id} added {quantity} x product {product_id} to cart")
    return cart


def update_cart_item(db: Session, user: User, product_id: int, quantity: int) -> Cart:
    if quantity is None or quantity <= 0:
        raise ValueError("Quantity must be greater than 0")

    cart = get_cart(db, user.user_id)
    item = _get_item(cart, product_id) if cart else None
    if not item:
        raise LookupError("Product not found in cart")

    _check_stock(item.product, quantity)
    item.quantity = quantity
    cart.updated_at = utcnow()
    db.commit()
    db.refresh(cart)
    return cart


def remove_from_cart(db: Session, user: User, product_id: int) -> Cart:
    cart = get_cart(db, user.user_id)
    item = _get_item(cart, product_id) if cart else None
    if not item:
        raise LookupError("Product not found in cart")

    cart.items.remove(item)
    cart.updated_at = utcnow()
    db.commit()
    db.refresh(cart)
    return cart


def clear_cart(db: Session, user: User, commit: bool = True) -> None:
    """Remove every line of the user's cart. Order placement passes commit=False."""
    cart = get_cart(db, user.user_id)
    if cart is None:
        return
    cart.items.clear()
    cart.updated_at = utcnow()
    if commit:
        db.commit()


def count_items(db: Session, user: User) -> int:
    cart = get_cart(db, user.user_id)
    if cart is None:
        return 0
    return sum(item.quantity for item in cart.items)


def validate_cart_for_checkout(db: Session, user: User) -> Cart:
    """
    Check that the cart can be turned into an order.

    Raises:
        ValueError: empty cart, a product that is no longer ACTIVE, or a line
        whose quantity exceeds the available stock
    """
    cart = get_cart(db, user.user_id)
    if cart is None or not cart.items:
        raise ValueError("Cart is empty")
    for item in cart.items:
        product = item.product
        if not product.is_active:
            raise ValueError(f"Product '{product.product_name}' is no longer available")
        _check_stock(product, item.quantity)
    return cart


def to_cart_response(cart: Optional[Cart]) -> dict:
    if cart is None:
        return {"cart_id": None, "items": [], "total_item_count": 0, "total_price": 0.0, "updated_at": None}

    items = []
    total_price = Decimal("0")
    for item in cart.items:
        product = item.product
        inventory = product.inventory
        line_total = item.line_total
        total_price += line_total
        items.append({
            "cart_item_id": item.cart_item_id,
            "product_id": product.product_id,
            "product_name": product.product_name,
            "product_type": product.type,
            "product_status": product.status,
            "seller_name": product.seller.seller_name if product.seller else None,
            "screenshot_preview_url": product.screenshot_preview_url,
            "quantity": item.quantity,
            "price_snapshot": float(item.price_snapshot),
            "current_price": float(product.price),
            "line_total": float(line_total),
            "available_quantity": inventory.available_quantity if inventory else 0,
            "is_unlimited": inventory.is_unlimited if inventory else False,
            "added_at": item.added_at,
        })
    return {
        "cart_id": cart.cart_id,
        "items": items,
        "total_item_count": sum(item.quantity for item in cart.items),
        "total_price": float(total_price),
        "updated_at": cart.updated_at,
    }
