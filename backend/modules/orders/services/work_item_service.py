import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import selectinload

from core.exceptions import NotFoundError, ValidationError
from core.store import Store
from ..enums.order_enums import WorkItemStatus
from ..models.order_models import OrderWorkItem

logger = logging.getLogger(__name__)

WORK_ITEM_STATUSES = {status.value for status in WorkItemStatus}


def validate_work_item_status(status: Optional[str]) -> str:
    """Status values are matched exactly; ``Pending`` is not ``pending``"""
    if status not in WORK_ITEM_STATUSES:
        raise ValidationError(
            f"Invalid work item status '{status}'",
            details={"allowed": [s.value for s in WorkItemStatus]},
        )
    return status


class WorkItemService:
    """Preparation status of individual order lines"""

    def __init__(self, store: Store):
        self.store = store

    def list_work_items(self, status: Optional[str] = None) -> List[OrderWorkItem]:
        criteria = []
        if status is not None:
            criteria.append(OrderWorkItem.status == validate_work_item_status(status))
        return self.store.find(
            OrderWorkItem,
            *criteria,
            order_by=[OrderWorkItem.updated_at.asc()],
            options=[selectinload(OrderWorkItem.order_item)],
        )

    def get_work_item(self, work_item_id: str) -> OrderWorkItem:
        return self.store.get(OrderWorkItem, work_item_id)

    def update_status(self, work_item_id: str, new_status: str) -> OrderWorkItem:
        """Move a work item to any status of the closed set"""
        new_status = validate_work_item_status(new_status)

        with self.store.transaction():
            updated = self.store.update(
                OrderWorkItem,
                work_item_id,
                {"status": new_status, "updated_at": datetime.utcnow()},
            )
            if not updated:
                logger.warning(f"Status update for unknown work item {work_item_id}")
                raise NotFoundError("OrderWorkItem", work_item_id)

        logger.info(f"Work item {work_item_id} is now {new_status}")
        return self.get_work_item(work_item_id)
