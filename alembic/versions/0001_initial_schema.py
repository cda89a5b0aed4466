"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('display_name', sa.String(100)),
        sa.Column('phone_number', sa.String(20)),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='ACTIVE'),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'password_reset_codes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('code', sa.String(6), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('expires_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('used', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_password_reset_codes_id', 'password_reset_codes', ['id'])
    op.create_index('ix_password_reset_codes_email', 'password_reset_codes', ['email'])

    op.create_table(
        'sellers',
        sa.Column('seller_id', sa.Integer(), primary_key=True),
        sa.Column('seller_name', sa.String(100), nullable=False),
        sa.Column('store_bio', sa.Text()),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False, unique=True),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_sellers_seller_id', 'sellers', ['seller_id'])

    op.create_table(
        'products',
        sa.Column('product_id', sa.Integer(), primary_key=True),
        sa.Column('product_name', sa.String(200), nullable=False),
        sa.Column('type', sa.String(50)),
        sa.Column('price', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='ACTIVE'),
        sa.Column('description', sa.Text()),
        sa.Column('screenshot_preview_url', sa.String(2048)),
        sa.Column('seller_id', sa.Integer(), sa.ForeignKey('sellers.seller_id'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_products_product_id', 'products', ['product_id'])
    op.create_index('ix_products_product_name', 'products', ['product_name'])

    op.create_table(
        'product_files',
        sa.Column('file_id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('file_key', sa.String(1024), nullable=False),
        sa.Column('file_type', sa.String(50)),
        sa.Column('file_format', sa.String(20)),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_product_files_file_id', 'product_files', ['file_id'])
    op.create_index('ix_product_files_product_id', 'product_files', ['product_id'])

    op.create_table(
        'inventory',
        sa.Column('inventory_id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id'), nullable=False, unique=True),
        sa.Column('qty_on_hand', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('qty_reserved', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_inventory_inventory_id', 'inventory', ['inventory_id'])

    op.create_table(
        'carts',
        sa.Column('cart_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False, unique=True),
        sa.Column('created_at', sa.TIMESTAMP()),
        sa.Column('updated_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_carts_cart_id', 'carts', ['cart_id'])

    op.create_table(
        'cart_items',
        sa.Column('cart_item_id', sa.Integer(), primary_key=True),
        sa.Column('cart_id', sa.Integer(), sa.ForeignKey('carts.cart_id'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price_snapshot', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('added_at', sa.TIMESTAMP()),
        sa.UniqueConstraint('cart_id', 'product_id', name='uq_cart_items_cart_product'),
    )
    op.create_index('ix_cart_items_cart_item_id', 'cart_items', ['cart_item_id'])

    op.create_table(
        'orders',
        sa.Column('order_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('total', sa.DECIMAL(10, 2), nullable=False, server_default='0'),
        sa.Column('status', sa.String(20), nullable=False, server_default='Pending'),
        sa.Column('delivery_address', sa.String(500)),
        sa.Column('card_last4', sa.String(4)),
        sa.Column('placed_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_orders_order_id', 'orders', ['order_id'])
    op.create_index('ix_orders_user_id', 'orders', ['user_id'])

    op.create_table(
        'order_products',
        sa.Column('order_product_id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.order_id'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('product_name_snapshot', sa.String(200), nullable=False),
        sa.Column('unit_price', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
    )
    op.create_index('ix_order_products_order_product_id', 'order_products', ['order_product_id'])
    op.create_index('ix_order_products_order_id', 'order_products', ['order_id'])
    op.create_index('ix_order_products_product_id', 'order_products', ['product_id'])

    op.create_table(
        'favorites',
        sa.Column('favorite_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('favorited_at', sa.TIMESTAMP(), nullable=False),
        sa.UniqueConstraint('user_id', 'product_id', name='uq_favorites_user_product'),
    )
    op.create_index('ix_favorites_favorite_id', 'favorites', ['favorite_id'])
    op.create_index('ix_favorites_user_id', 'favorites', ['user_id'])

    op.create_table(
        'conversations',
        sa.Column('conversation_id', sa.Integer(), primary_key=True),
        sa.Column('user1_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('user2_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('ix_conversations_conversation_id', 'conversations', ['conversation_id'])
    op.create_index('ix_conversations_user1_id', 'conversations', ['user1_id'])
    op.create_index('ix_conversations_user2_id', 'conversations', ['user2_id'])

    op.create_table(
        'messages',
        sa.Column('message_id', sa.Integer(), primary_key=True),
        sa.Column('conversation_id', sa.Integer(), sa.ForeignKey('conversations.conversation_id'), nullable=False),
        sa.Column('sender_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('sent_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('ix_messages_message_id', 'messages', ['message_id'])
    op.create_index('ix_messages_conversation_id', 'messages', ['conversation_id'])

    op.create_table(
        'posts',
        sa.Column('post_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('content', sa.String(500), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('ix_posts_post_id', 'posts', ['post_id'])
    op.create_index('ix_posts_user_id', 'posts', ['user_id'])

    op.create_table(
        'comments',
        sa.Column('comment_id', sa.Integer(), primary_key=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.post_id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.Column('content', sa.String(200), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('ix_comments_comment_id', 'comments', ['comment_id'])
    op.create_index('ix_comments_post_id', 'comments', ['post_id'])

    op.create_table(
        'post_likes',
        sa.Column('like_id', sa.Integer(), primary_key=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.post_id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id'), nullable=False),
        sa.UniqueConstraint('post_id', 'user_id', name='uq_post_likes_post_user'),
    )
    op.create_index('ix_post_likes_like_id', 'post_likes', ['like_id'])
    op.create_index('ix_post_likes_post_id', 'post_likes', ['post_id'])


def downgrade() -> None:
    for table in (
        'post_likes', 'comments', 'posts', 'messages', 'conversations', 'favorites',
        'order_products', 'orders', 'cart_items', 'carts', 'inventory', 'product_files',
        'products', 'sellers', 'password_reset_codes', 'users',
    ):
        op.drop_table(table)
