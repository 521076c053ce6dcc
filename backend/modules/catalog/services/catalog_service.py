# backend/modules/catalog/services/catalog_service.py

import logging
from typing import Any, Dict, List, Optional

from core.exceptions import NotFoundError, ValidationError
from core.store import Store
from ..models.catalog_models import Item, ItemType
from ..schemas.catalog_schemas import (
    ItemCreate,
    ItemTypeCreate,
    ItemTypeUpdate,
    ItemUpdate,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Service class for item types and items"""

    def __init__(self, store: Store):
        self.store = store

    # Item type operations
    def create_item_type(self, item_type_data: ItemTypeCreate) -> ItemType:
        """Create a new item type"""
        name = self._clean_name(item_type_data.name, "Item type")
        self._ensure_type_name_free(name)

        with self.store.transaction():
            item_type = self.store.create(
                ItemType(name=name, display_name=item_type_data.display_name)
            )
            item_type_id = item_type.id

        logger.info(f"Created item type {item_type_id} ({name})")
        return self.get_item_type(item_type_id)

    def list_item_types(self) -> List[ItemType]:
        return self.store.find(ItemType, order_by=[ItemType.name.asc()])

    def get_item_type(self, item_type_id: str) -> ItemType:
        return self.store.get(ItemType, item_type_id)

    def update_item_type(
        self, item_type_id: str, item_type_data: ItemTypeUpdate
    ) -> ItemType:
        """Update an item type; only fields present in the request change"""
        self.get_item_type(item_type_id)

        values = {
            field: value
            for field, value in item_type_data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if "name" in values:
            values["name"] = self._clean_name(values["name"], "Item type")
            self._ensure_type_name_free(values["name"], exclude_id=item_type_id)

        if values:
            with self.store.transaction():
                if not self.store.update(ItemType, item_type_id, values):
                    raise NotFoundError("ItemType", item_type_id)
            logger.info(f"Updated item type {item_type_id}: {sorted(values)}")

        return self.get_item_type(item_type_id)

    def delete_item_type(self, item_type_id: str) -> None:
        """Soft delete an item type that no live item refers to"""
        live_items = self.store.count(Item, Item.item_type_id == item_type_id)
        if live_items:
            logger.warning(
                f"Refused to delete item type {item_type_id}: "
                f"{live_items} item(s) still use it"
            )
            raise ValidationError(
                f"Item type {item_type_id} is still used by {live_items} item(s)",
                details={"item_type_id": item_type_id, "items": live_items},
            )

        with self.store.transaction():
            if not self.store.soft_delete(ItemType, item_type_id):
                raise NotFoundError("ItemType", item_type_id)

        logger.info(f"Deleted item type {item_type_id}")

    # Item operations
    def create_item(self, item_data: ItemCreate) -> Item:
        """Create a new item under a live item type"""
        values = item_data.model_dump()
        values["name"] = self._clean_name(values["name"], "Item")
        values["assignee"] = values.get("assignee") or None
        self._ensure_item_type_exists(values["item_type_id"])

        with self.store.transaction():
            item = self.store.create(Item(**values))
            item_id = item.id

        logger.info(f"Created item {item_id} ({values['name']})")
        return self.get_item(item_id)

    def get_item(self, item_id: str) -> Item:
        return self.store.get(Item, item_id)

    def list_items(self, item_type_id: Optional[str] = None) -> List[Item]:
        criteria = []
        if item_type_id:
            criteria.append(Item.item_type_id == item_type_id)
        return self.store.find(Item, *criteria, order_by=[Item.name.asc()])

    def update_item(self, item_id: str, item_data: ItemUpdate) -> Item:
        """
        Update an item.

        Fields left out of the request keep their stored value. An explicit
        empty string is a value, except for ``assignee`` where it clears the
        assignment.
        """
        item = self.get_item(item_id)
        values = self._item_update_values(item_data.model_dump(exclude_unset=True))

        if "name" in values:
            values["name"] = self._clean_name(values["name"], "Item")
        if values.get("item_type_id") not in (None, item.item_type_id):
            self._ensure_item_type_exists(values["item_type_id"])

        if values:
            with self.store.transaction():
                if not self.store.update(Item, item_id, values):
                    raise NotFoundError("Item", item_id)
            logger.info(f"Updated item {item_id}: {sorted(values)}")

        return self.get_item(item_id)

    def delete_item(self, item_id: str) -> None:
        """Soft delete an item; order lines keep pointing at it"""
        with self.store.transaction():
            if not self.store.soft_delete(Item, item_id):
                raise NotFoundError("Item", item_id)

        logger.info(f"Deleted item {item_id}")

    # Helpers
    @staticmethod
    def _clean_name(name: Optional[str], label: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError(f"{label} name must not be empty")
        return name

    @staticmethod
    def _item_update_values(requested: Dict[str, Any]) -> Dict[str, Any]:
        values = {}
        for field, value in requested.items():
            if field == "assignee":
                values[field] = value or None
            elif value is not None:
                values[field] = value
        return values

    def _ensure_type_name_free(self, name: str, exclude_id: Optional[str] = None):
        criteria = [ItemType.name == name]
        if exclude_id:
            criteria.append(ItemType.id != exclude_id)
        if self.store.count(ItemType, *criteria):
            logger.warning(f"Item type name already in use: {name}")
            raise ValidationError(
                f"Item type '{name}' already exists", details={"name": name}
            )

    def _ensure_item_type_exists(self, item_type_id: str) -> None:
        try:
            self.store.get(ItemType, item_type_id)
        except NotFoundError:
            logger.warning(f"Rejected unknown item type {item_type_id}")
            raise ValidationError(
                f"Item type {item_type_id} does not exist",
                details={"item_type_id": item_type_id},
            )
