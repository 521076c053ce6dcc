from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from core.store import Store, get_store
from ..services.order_service import OrderService
from ..schemas.order_schemas import (
    AssigneeUpdate,
    DiscountStatusOut,
    OrderCreate,
    OrderItemOut,
    OrderOut,
    OrderUpdate,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


def get_order_service(store: Store = Depends(get_store)) -> OrderService:
    """Dependency to get order service instance"""
    return OrderService(store)


@router.get("", response_model=List[OrderOut])
async def list_orders(
    limit: Optional[int] = Query(
        None, ge=1, description="Number of orders to return"
    ),
    offset: int = Query(0, ge=0, description="Number of orders to skip"),
    order_service: OrderService = Depends(get_order_service),
):
    """
    Retrieve orders, newest first.

    - **limit**: Maximum number of orders to return (capped by configuration)
    - **offset**: Number of orders to skip for pagination
    """
    return order_service.list_orders(limit, offset)


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Create an order.

    Each entry of **item_ids** becomes one line item, so repeating an id
    orders that item more than once.
    """
    return order_service.create_order(order_data)


@router.get("/{order_id}", response_model=OrderOut)
async def get_order(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    return order_service.get_order(order_id)


@router.put("/{order_id}", response_model=OrderOut)
async def update_order(
    order_id: str,
    order_data: OrderUpdate,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Update an order.

    Omit **item_ids** (or send null) to keep the line items; send a list,
    even an empty one, to replace them.
    """
    return order_service.update_order(order_id, order_data)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    order_service.delete_order(order_id)


@router.patch("/{order_id}/ready", response_model=OrderOut)
async def mark_order_ready(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    return order_service.mark_ready(order_id)


@router.patch("/{order_id}/served", response_model=OrderOut)
async def mark_order_served(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    return order_service.mark_served(order_id)


@router.patch("/{order_id}/ready/undo", response_model=OrderOut)
async def undo_order_ready(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    return order_service.undo_ready(order_id)


@router.patch("/{order_id}/served/undo", response_model=OrderOut)
async def undo_order_served(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    return order_service.undo_served(order_id)


@router.get("/{order_id}/discount-status", response_model=DiscountStatusOut)
async def get_discount_status(
    order_id: str, order_service: OrderService = Depends(get_order_service)
):
    """Whether this order can still be used as a discount order"""
    return DiscountStatusOut(
        order_id=order_id, status=order_service.discount_order_status(order_id)
    )


@router.patch(
    "/{order_id}/items/{order_item_id}/assignee", response_model=OrderItemOut
)
async def assign_order_item(
    order_id: str,
    order_item_id: str,
    assignee_data: AssigneeUpdate,
    order_service: OrderService = Depends(get_order_service),
):
    return order_service.assign_order_item(
        order_id, order_item_id, assignee_data.assignee
    )
