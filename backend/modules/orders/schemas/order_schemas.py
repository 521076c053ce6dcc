from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from modules.catalog.schemas.catalog_schemas import ItemOut
from ..enums.order_enums import DiscountOrderStatus


class CommentCreate(BaseModel):
    # Checked against CommentAuthor by the service
    author: str
    text: str


class CommentOut(BaseModel):
    id: str
    order_id: str
    author: str
    text: str
    created_at: datetime

    class Config:
        from_attributes = True


class WorkItemStatusUpdate(BaseModel):
    status: str


class WorkItemOut(BaseModel):
    id: str
    order_id: str
    order_item_id: str
    item_id: str
    status: str
    updated_at: datetime

    class Config:
        from_attributes = True


class OrderItemOut(BaseModel):
    id: str
    order_id: str
    item_id: str
    position: int
    assignee: Optional[str] = None
    item: ItemOut
    work_item: Optional[WorkItemOut] = None

    class Config:
        from_attributes = True


class AssigneeUpdate(BaseModel):
    assignee: Optional[str] = Field(
        None, max_length=100, description="Null or empty string clears it"
    )


class OrderBase(BaseModel):
    order_number: int
    billing_amount: int = Field(default=0, ge=0)
    received_amount: int = Field(default=0, ge=0)
    discount_order_id: Optional[str] = None
    discount_order_cups: Optional[int] = Field(
        None, ge=0, description="Caps the cups taken from the discount order"
    )


class OrderCreate(OrderBase):
    item_ids: List[str] = Field(
        ..., description="Ordered item ids; repeat an id to order it again"
    )
    comments: List[CommentCreate] = []


class OrderUpdate(BaseModel):
    """
    Partial order update.

    ``item_ids`` left out or null keeps the current line items; any list,
    including an empty one, replaces them.
    """

    order_number: Optional[int] = None
    billing_amount: Optional[int] = Field(None, ge=0)
    received_amount: Optional[int] = Field(None, ge=0)
    discount_order_id: Optional[str] = None
    discount_order_cups: Optional[int] = Field(None, ge=0)
    item_ids: Optional[List[str]] = None


class OrderOut(OrderBase):
    id: str
    created_at: datetime
    updated_at: datetime
    ready_at: Optional[datetime] = None
    served_at: Optional[datetime] = None
    total: int
    coffee_cups: int
    discount: int
    charge: int
    order_items: List[OrderItemOut] = []
    comments: List[CommentOut] = []

    class Config:
        from_attributes = True


class DiscountStatusOut(BaseModel):
    order_id: str
    status: DiscountOrderStatus
