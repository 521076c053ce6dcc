from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin, UUIDPrimaryKeyMixin
from modules.catalog.models.catalog_models import Item
from ..config.order_config import get_order_config
from ..enums.order_enums import WorkItemStatus


class Order(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "orders"

    # Ticket number shown to the customer; reused across business days
    order_number = Column(Integer, nullable=False, index=True)
    ready_at = Column(DateTime, nullable=True)
    served_at = Column(DateTime, nullable=True)
    billing_amount = Column(Integer, nullable=False, default=0)
    received_amount = Column(Integer, nullable=False, default=0)
    discount_order_id = Column(
        String(36), ForeignKey("orders.id"), nullable=True, index=True
    )
    discount_order_cups = Column(Integer, nullable=False, default=0)

    order_items = relationship(
        "OrderItem", back_populates="order", order_by="OrderItem.position"
    )
    comments = relationship(
        "Comment", back_populates="order", order_by="Comment.created_at.desc()"
    )
    discount_order = relationship(
        "Order", remote_side="Order.id", foreign_keys=[discount_order_id]
    )

    @property
    def total(self) -> int:
        return sum(order_item.item.price for order_item in self.order_items)

    @property
    def coffee_cups(self) -> int:
        excluded = get_order_config().non_discountable_item_types
        return sum(
            1
            for order_item in self.order_items
            if order_item.item.item_type.name not in excluded
        )

    @property
    def discount(self) -> int:
        cups = min(self.coffee_cups, self.discount_order_cups or 0)
        return cups * get_order_config().DISCOUNT_PER_CUP

    @property
    def charge(self) -> int:
        """Change owed to the customer"""
        return (self.received_amount or 0) - (self.billing_amount or 0)

    def __repr__(self):
        return f"<Order(id={self.id}, order_number={self.order_number})>"


class OrderItem(Base, UUIDPrimaryKeyMixin):
    """One unit of an item in an order; an item ordered twice has two rows"""

    __tablename__ = "order_items"

    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    item_id = Column(String(36), ForeignKey("items.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    assignee = Column(String(100), nullable=True)

    order = relationship("Order", back_populates="order_items")
    item = relationship(Item)
    work_item = relationship("OrderWorkItem", back_populates="order_item", uselist=False)


class OrderWorkItem(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "order_work_items"

    order_item_id = Column(
        String(36), ForeignKey("order_items.id"), nullable=False, unique=True
    )
    item_id = Column(String(36), ForeignKey("items.id"), nullable=False)
    status = Column(
        String(20), nullable=False, default=WorkItemStatus.PENDING.value, index=True
    )
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow,
                        nullable=False)

    order_item = relationship("OrderItem", back_populates="work_item")
    item = relationship(Item)

    @property
    def order_id(self) -> str:
        return self.order_item.order_id


class Comment(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "comments"

    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    author = Column(String(20), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    order = relationship("Order", back_populates="comments")
