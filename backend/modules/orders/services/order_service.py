import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import selectinload

from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.store import Store
from modules.catalog.models.catalog_models import Item
from ..config.order_config import OrderConfig, get_order_config
from ..enums.order_enums import DiscountOrderStatus, WorkItemStatus
from ..models.order_models import Comment, Order, OrderItem, OrderWorkItem
from ..schemas.order_schemas import OrderCreate, OrderUpdate
from .comment_service import validate_comment

logger = logging.getLogger(__name__)


def _hydrated():
    """Loader options for returning a complete order"""
    return [
        selectinload(Order.order_items)
        .selectinload(OrderItem.item)
        .selectinload(Item.item_type),
        selectinload(Order.order_items).selectinload(OrderItem.work_item),
        selectinload(Order.comments),
    ]


class OrderService:
    """
    Order aggregate operations.

    Every operation that writes more than one row runs inside a single
    ``store.transaction()``, and all input is validated before the first
    write, so a rejected request leaves the store untouched.
    """

    def __init__(self, store: Store, config: Optional[OrderConfig] = None):
        self.store = store
        self.config = config or get_order_config()

    def create_order(self, order_data: OrderCreate) -> Order:
        """Create an order with one line item per entry of ``item_ids``"""
        if not order_data.item_ids:
            logger.warning("Rejected order without items")
            raise ValidationError("An order needs at least one item")

        self._resolve_items(order_data.item_ids)
        if order_data.discount_order_id:
            self._ensure_discount_available(order_data.discount_order_id)
        comments = [
            validate_comment(comment.author, comment.text)
            for comment in order_data.comments
        ]

        values = order_data.model_dump(exclude={"item_ids", "comments"})
        values["discount_order_id"] = values["discount_order_id"] or None
        values["discount_order_cups"] = self._discount_cups(
            values["discount_order_id"], values["discount_order_cups"]
        )

        with self.store.transaction():
            order = self.store.create(Order(**values))
            order_id = order.id
            self._add_order_items(order_id, order_data.item_ids)
            for author, text in comments:
                self.store.create(Comment(order_id=order_id, author=author, text=text))

        logger.info(
            f"Created order {order_id} (#{order_data.order_number}) "
            f"with {len(order_data.item_ids)} item(s)"
        )
        return self.get_order(order_id)

    def get_order(self, order_id: str) -> Order:
        return self.store.get(Order, order_id, options=_hydrated())

    def list_orders(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Order]:
        """Newest orders first"""
        limit = min(limit or self.config.DEFAULT_PAGE_SIZE, self.config.MAX_PAGE_SIZE)
        return self.store.find(
            Order,
            order_by=[Order.created_at.desc()],
            limit=limit,
            offset=offset,
            options=_hydrated(),
        )

    def update_order(self, order_id: str, order_data: OrderUpdate) -> Order:
        """
        Partially update an order.

        When ``item_ids`` is a list the line items are replaced as a whole:
        every id is resolved first, then the old line items and their work
        items are removed and the new ones inserted in the same transaction
        as the scalar changes.
        """
        order = self.store.get(Order, order_id)

        requested = order_data.model_dump(exclude_unset=True)
        item_ids = requested.pop("item_ids", None)
        # Null clears the discount reference; for the other fields it means
        # "leave as is"
        values = {
            field: value
            for field, value in requested.items()
            if value is not None or field == "discount_order_id"
        }

        if "discount_order_id" in values:
            values["discount_order_id"] = values["discount_order_id"] or None
        discount_order_id = values.get("discount_order_id", order.discount_order_id)
        if discount_order_id and discount_order_id != order.discount_order_id:
            if discount_order_id == order_id:
                raise ValidationError("An order cannot be its own discount order")
            self._ensure_discount_available(discount_order_id, for_order_id=order_id)
        if "discount_order_id" in values or "discount_order_cups" in values:
            values["discount_order_cups"] = self._discount_cups(
                discount_order_id, values.get("discount_order_cups")
            )

        if item_ids:
            self._resolve_items(item_ids)
        if item_ids is not None:
            values["updated_at"] = datetime.utcnow()

        with self.store.transaction():
            if values and not self.store.update(Order, order_id, values):
                raise NotFoundError("Order", order_id)
            if item_ids is not None:
                self._remove_order_items(order_id)
                self._add_order_items(order_id, item_ids)

        if item_ids is not None:
            logger.info(f"Replaced items of order {order_id}: {len(item_ids)} item(s)")
        logger.info(f"Updated order {order_id}: {sorted(values)}")
        return self.get_order(order_id)

    def delete_order(self, order_id: str) -> None:
        """Delete an order together with its line items, work items and comments"""
        with self.store.transaction():
            self._remove_order_items(order_id)
            self.store.delete_where(Comment, Comment.order_id == order_id)
            self.store.update_where(
                Order,
                {"discount_order_id": None, "discount_order_cups": 0},
                Order.discount_order_id == order_id,
            )
            if not self.store.delete(Order, order_id):
                raise NotFoundError("Order", order_id)

        logger.info(f"Deleted order {order_id}")

    # Lifecycle timestamps
    def mark_ready(self, order_id: str) -> Order:
        order = self.store.get(Order, order_id)
        if order.served_at is not None:
            logger.warning(f"Refused to mark served order {order_id} as ready")
            raise ConflictError(
                f"Order {order_id} has already been served",
                details={"served_at": order.served_at.isoformat()},
            )
        if order.ready_at is None:
            self._stamp(order_id, {"ready_at": datetime.utcnow()})
            logger.info(f"Order {order_id} is ready")
        return self.get_order(order_id)

    def mark_served(self, order_id: str) -> Order:
        """Stamp ``served_at``; an order served before it was marked ready gets both"""
        order = self.store.get(Order, order_id)
        if order.served_at is None:
            now = datetime.utcnow()
            values = {"served_at": now}
            if order.ready_at is None:
                values["ready_at"] = now
            self._stamp(order_id, values)
            logger.info(f"Order {order_id} is served")
        return self.get_order(order_id)

    def undo_ready(self, order_id: str) -> Order:
        order = self.store.get(Order, order_id)
        if order.served_at is not None:
            raise ConflictError(
                f"Order {order_id} has been served; undo served first"
            )
        self._stamp(order_id, {"ready_at": None})
        return self.get_order(order_id)

    def undo_served(self, order_id: str) -> Order:
        order = self.store.get(Order, order_id)
        values = {"served_at": None}
        # Both stamped by the same mark_served call
        if order.served_at is not None and order.ready_at == order.served_at:
            values["ready_at"] = None
        self._stamp(order_id, values)
        return self.get_order(order_id)

    def assign_order_item(
        self, order_id: str, order_item_id: str, assignee: Optional[str]
    ) -> OrderItem:
        """Set or clear (None or empty string) who prepares one line item"""
        self.store.get(Order, order_id)
        if not self.store.count(
            OrderItem, OrderItem.id == order_item_id, OrderItem.order_id == order_id
        ):
            raise NotFoundError("OrderItem", order_item_id)

        with self.store.transaction():
            self.store.update(OrderItem, order_item_id, {"assignee": assignee or None})

        logger.info(f"Assigned item {order_item_id} of order {order_id} to {assignee or 'nobody'}")
        return self.store.get(OrderItem, order_item_id)

    def discount_order_status(self, order_id: str) -> DiscountOrderStatus:
        """
        Whether an order can still be referenced as a discount order.

        An order another order already references is ``already_used``, even
        if it has since been un-served. Orders that do not exist, or that
        have not been served, are ``unserved``.
        """
        return self._discount_status(order_id)

    # Helpers
    def _discount_status(
        self, order_id: str, for_order_id: Optional[str] = None
    ) -> DiscountOrderStatus:
        orders = self.store.find(Order, Order.id == order_id)
        if not orders:
            return DiscountOrderStatus.UNSERVED

        criteria = [Order.discount_order_id == order_id]
        if for_order_id:
            criteria.append(Order.id != for_order_id)
        if self.store.count(Order, *criteria):
            return DiscountOrderStatus.ALREADY_USED
        if orders[0].served_at is None:
            return DiscountOrderStatus.UNSERVED
        return DiscountOrderStatus.AVAILABLE

    def _discount_cups(
        self, discount_order_id: Optional[str], requested: Optional[int] = None
    ) -> int:
        """Coffee cups of the discount order, capped by ``requested`` when given"""
        if not discount_order_id:
            return 0
        cups = self.store.get(Order, discount_order_id, options=_hydrated()).coffee_cups
        if requested is not None:
            cups = min(cups, requested)
        return cups

    def _ensure_discount_available(
        self, discount_order_id: str, for_order_id: Optional[str] = None
    ) -> None:
        discount_status = self._discount_status(discount_order_id, for_order_id)
        if discount_status != DiscountOrderStatus.AVAILABLE:
            logger.warning(
                f"Rejected discount order {discount_order_id}: {discount_status.value}"
            )
            raise ValidationError(
                f"Order {discount_order_id} cannot be used as a discount order",
                details={
                    "discount_order_id": discount_order_id,
                    "status": discount_status.value,
                },
            )

    def _resolve_items(self, item_ids: List[str]) -> Dict[str, Item]:
        """Look up the distinct ids among live items; any miss is a ValidationError"""
        wanted = set(item_ids)
        items = {item.id: item for item in self.store.find(Item, Item.id.in_(wanted))}
        missing = sorted(wanted - set(items))
        if missing:
            logger.warning(f"Rejected unknown item ids: {missing}")
            raise ValidationError(
                f"Unknown item ids: {', '.join(missing)}",
                details={"item_ids": missing},
            )
        return items

    def _add_order_items(self, order_id: str, item_ids: List[str]) -> None:
        for position, item_id in enumerate(item_ids):
            order_item = self.store.create(
                OrderItem(order_id=order_id, item_id=item_id, position=position)
            )
            self.store.create(
                OrderWorkItem(
                    order_item_id=order_item.id,
                    item_id=item_id,
                    status=WorkItemStatus.PENDING.value,
                )
            )

    def _remove_order_items(self, order_id: str) -> None:
        order_item_ids = [
            order_item.id
            for order_item in self.store.find(OrderItem, OrderItem.order_id == order_id)
        ]
        if not order_item_ids:
            return
        self.store.delete_where(
            OrderWorkItem, OrderWorkItem.order_item_id.in_(order_item_ids)
        )
        self.store.delete_where(OrderItem, OrderItem.id.in_(order_item_ids))

    def _stamp(self, order_id: str, values: Dict[str, Optional[datetime]]) -> None:
        with self.store.transaction():
            if not self.store.update(Order, order_id, values):
                raise NotFoundError("Order", order_id)
