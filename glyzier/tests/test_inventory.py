from ..inventory.models import Inventory, UNLIMITED_STOCK


def test_available_is_on_hand_minus_reserved():
    inventory = Inventory(qty_on_hand=10, qty_reserved=3)
    assert inventory.available_quantity == 7
    assert inventory.in_stock is True
    assert inventory.is_unlimited is False


def test_unlimited_sentinel():
    inventory = Inventory(qty_on_hand=UNLIMITED_STOCK, qty_reserved=5)
    assert inventory.is_unlimited is True
    assert inventory.available_quantity is None
    assert inventory.in_stock is True
    assert inventory.can_supply(1_000_000) is True


def test_out_of_stock_when_everything_reserved():
    inventory = Inventory(qty_on_hand=2, qty_reserved=2)
    assert inventory.available_quantity == 0
    assert inventory.in_stock is False
    assert inventory.can_supply(1) is False


def test_reserve_and_release():
    inventory = Inventory(qty_on_hand=5, qty_reserved=0)
    assert inventory.reserve(3) is True
    assert inventory.qty_reserved == 3
    assert inventory.reserve(3) is False
    assert inventory.qty_reserved == 3

    inventory.release(10)
    assert inventory.qty_reserved == 0


def test_reserve_unlimited_does_not_track():
    inventory = Inventory(qty_on_hand=UNLIMITED_STOCK, qty_reserved=0)
    assert inventory.reserve(50) is True
    assert inventory.qty_reserved == 0


def test_fulfill_clamps_at_zero():
    inventory = Inventory(qty_on_hand=3, qty_reserved=2)
    inventory.fulfill(2)
    assert inventory.qty_on_hand == 1
    assert inventory.qty_reserved == 0

    inventory.fulfill(5)
    assert inventory.qty_on_hand == 0


def test_decrement_skips_unlimited():
    limited = Inventory(qty_on_hand=4, qty_reserved=0)
    limited.decrement(3)
    assert limited.qty_on_hand == 1

    unlimited = Inventory(qty_on_hand=UNLIMITED_STOCK, qty_reserved=0)
    unlimited.decrement(3)
    unlimited.fulfill(3)
    assert unlimited.qty_on_hand == UNLIMITED_STOCK
