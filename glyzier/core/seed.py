from decimal import Decimal
from sqlalchemy.orm import Session
from ..models import User, Seller, Product, Inventory
from ..product.models import PRODUCT_STATUS_ACTIVE
from ..inventory.models import UNLIMITED_STOCK
from .security import hash_password
import logging

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@glyzier.com"
DEMO_PASSWORD = "demo123"
DEMO_SELLER_NAME = "Demo Art Studio"

DEMO_PRODUCTS = [
    {
        "product_name": "Sunset Over Mountains",
        "type": "Print",
        "price": Decimal("45.00"),
        "description": "High-quality giclee print of a mountain sunset, printed on archival paper.",
        "stock": 25,
    },
    {
        "product_name": "Abstract Dreams",
        "type": "Digital",
        "price": Decimal("15.99"),
        "description": "Vibrant abstract digital artwork, delivered as a high-resolution download.",
        "stock": UNLIMITED_STOCK,
    },
    {
        "product_name": "Ocean Waves",
        "type": "Original",
        "price": Decimal("350.00"),
        "description": "One-of-a-kind acrylic painting on canvas.",
        "stock": 1,
    },
    {
        "product_name": "City Lights",
        "type": "Print",
        "price": Decimal("39.50"),
        "description": "Night skyline print with metallic ink highlights.",
        "stock": 40,
    },
    {
        "product_name": "Botanical Line Art Pack",
        "type": "Digital",
        "price": Decimal("9.99"),
        "description": "Set of twelve minimalist botanical illustrations for printing at home.",
        "stock": UNLIMITED_STOCK,
    },
]


def seed_demo_data(db: Session) -> bool:
    """
    Populate an empty database with a demo seller account and products.

    Nothing is written when any user already exists.

    Returns:
        bool: True when demo data was created
    """
    if db.query(User).count() > 0:
        logger.info("Users already exist, skipping demo data")
        return False

    user = User(email=DEMO_EMAIL, password=hash_password(DEMO_PASSWORD), display_name="Demo Artist")
    db.add(user)
    db.flush()

    seller = Seller(seller_name=DEMO_SELLER_NAME,
                    store_bio="Sample shop showing prints, originals and digital downloads.",
                    user_id=user.user_id)
    db.add(seller)
    db.flush()

    for item in DEMO_PRODUCTS:
        product = Product(
            product_name=item["product_name"],
            type=item["type"],
            price=item["price"],
            status=PRODUCT_STATUS_ACTIVE,
            description=item["description"],
            seller_id=seller.seller_id
        )
        product.inventory = Inventory(qty_on_hand=item["stock"], qty_reserved=0)
        db.add(product)

    db.commit()
    logger.info(f"Seeded demo user {DEMO_EMAIL} with {len(DEMO_PRODUCTS)} products")
    return True
