# Import every model so Base.metadata knows all tables and relationship
# strings resolve; used by the app, Alembic and the tests.
from .core.database import Base
from .user.models import User
from .auth.models import PasswordResetCode
from .seller.models import Seller
from .product.models import Product, ProductFile
from .inventory.models import Inventory
from .cart.models import Cart, CartItem
from .order.models import Order, OrderProduct
from .favorites.models import Favorite
from .message.models import Conversation, Message
from .post.models import Post, Comment, PostLike

__all__ = [
    'Base', 'User', 'PasswordResetCode', 'Seller', 'Product', 'ProductFile', 'Inventory',
    'Cart', 'CartItem', 'Order', 'OrderProduct', 'Favorite', 'Conversation', 'Message',
    'Post', 'Comment', 'PostLike'
]
