from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from core.store import Store, get_store
from ..services.work_item_service import WorkItemService
from ..schemas.order_schemas import WorkItemOut, WorkItemStatusUpdate

router = APIRouter(prefix="/work-items", tags=["Work Items"])


def get_work_item_service(store: Store = Depends(get_store)) -> WorkItemService:
    """Dependency to get work item service instance"""
    return WorkItemService(store)


@router.get("", response_model=List[WorkItemOut])
async def list_work_items(
    status: Optional[str] = Query(
        None, description="pending, in_progress, ready or served"
    ),
    work_item_service: WorkItemService = Depends(get_work_item_service),
):
    return work_item_service.list_work_items(status)


@router.get("/{work_item_id}", response_model=WorkItemOut)
async def get_work_item(
    work_item_id: str,
    work_item_service: WorkItemService = Depends(get_work_item_service),
):
    return work_item_service.get_work_item(work_item_id)


@router.patch("/{work_item_id}/status", response_model=WorkItemOut)
async def update_work_item_status(
    work_item_id: str,
    status_data: WorkItemStatusUpdate,
    work_item_service: WorkItemService = Depends(get_work_item_service),
):
    """Move a line item through its preparation workflow"""
    return work_item_service.update_status(work_item_id, status_data.status)
