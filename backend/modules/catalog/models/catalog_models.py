# backend/modules/catalog/models/catalog_models.py

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import SoftDeleteMixin, TimestampMixin, UUIDPrimaryKeyMixin


class ItemType(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """Category of menu items (coffee, milk, others, ...)"""

    __tablename__ = "item_types"

    # Uniqueness is enforced among live rows by the service, so a deleted
    # type's name can be reused.
    name = Column(String(100), nullable=False, index=True)
    display_name = Column(String(200), nullable=False, default="")

    items = relationship("Item", back_populates="item_type")

    def __repr__(self):
        return f"<ItemType(id={self.id}, name='{self.name}')>"


class Item(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    """A sellable menu item"""

    __tablename__ = "items"

    name = Column(String(200), nullable=False, index=True)
    abbreviation = Column(String(50), nullable=False, default="")
    price = Column(Integer, nullable=False, default=0)  # minor currency units
    key = Column(String(50), nullable=False, default="")
    assignee = Column(String(100), nullable=True)
    item_type_id = Column(
        String(36), ForeignKey("item_types.id"), nullable=False, index=True
    )

    item_type = relationship("ItemType", back_populates="items")

    def __repr__(self):
        return f"<Item(id={self.id}, name='{self.name}', price={self.price})>"
