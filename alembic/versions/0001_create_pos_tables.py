"""Create catalog and order tables

Revision ID: 0001_create_pos_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_pos_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'item_types',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('display_name', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_item_types_id', 'item_types', ['id'])
    op.create_index('ix_item_types_name', 'item_types', ['name'])
    op.create_index('ix_item_types_deleted_at', 'item_types', ['deleted_at'])

    op.create_table(
        'items',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('abbreviation', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=50), nullable=False),
        sa.Column('assignee', sa.String(length=100), nullable=True),
        sa.Column('item_type_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['item_type_id'], ['item_types.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_items_id', 'items', ['id'])
    op.create_index('ix_items_name', 'items', ['name'])
    op.create_index('ix_items_item_type_id', 'items', ['item_type_id'])
    op.create_index('ix_items_deleted_at', 'items', ['deleted_at'])

    op.create_table(
        'orders',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('order_number', sa.Integer(), nullable=False),
        sa.Column('ready_at', sa.DateTime(), nullable=True),
        sa.Column('served_at', sa.DateTime(), nullable=True),
        sa.Column('billing_amount', sa.Integer(), nullable=False),
        sa.Column('received_amount', sa.Integer(), nullable=False),
        sa.Column('discount_order_id', sa.String(length=36), nullable=True),
        sa.Column('discount_order_cups', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['discount_order_id'], ['orders.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_orders_id', 'orders', ['id'])
    op.create_index('ix_orders_order_number', 'orders', ['order_number'])
    op.create_index('ix_orders_discount_order_id', 'orders', ['discount_order_id'])

    op.create_table(
        'order_items',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('order_id', sa.String(length=36), nullable=False),
        sa.Column('item_id', sa.String(length=36), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('assignee', sa.String(length=100), nullable=True),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id']),
        sa.ForeignKeyConstraint(['item_id'], ['items.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_order_items_id', 'order_items', ['id'])
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])
    op.create_index('ix_order_items_item_id', 'order_items', ['item_id'])

    op.create_table(
        'order_work_items',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('order_item_id', sa.String(length=36), nullable=False),
        sa.Column('item_id', sa.String(length=36), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['order_item_id'], ['order_items.id']),
        sa.ForeignKeyConstraint(['item_id'], ['items.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('order_item_id'),
    )
    op.create_index('ix_order_work_items_id', 'order_work_items', ['id'])
    op.create_index('ix_order_work_items_status', 'order_work_items', ['status'])

    op.create_table(
        'comments',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('order_id', sa.String(length=36), nullable=False),
        sa.Column('author', sa.String(length=20), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_comments_id', 'comments', ['id'])
    op.create_index('ix_comments_order_id', 'comments', ['order_id'])


def downgrade():
    op.drop_table('comments')
    op.drop_table('order_work_items')
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('items')
    op.drop_table('item_types')
