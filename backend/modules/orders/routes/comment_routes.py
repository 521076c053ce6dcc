from fastapi import APIRouter, Depends, status
from typing import List

from core.store import Store, get_store
from ..services.comment_service import CommentService
from ..schemas.order_schemas import CommentCreate, CommentOut

router = APIRouter(prefix="/orders/{order_id}/comments", tags=["Order Comments"])


def get_comment_service(store: Store = Depends(get_store)) -> CommentService:
    return CommentService(store)


@router.get("", response_model=List[CommentOut])
async def list_comments(
    order_id: str, comment_service: CommentService = Depends(get_comment_service)
):
    """Comments of an order, newest first"""
    return comment_service.list_comments(order_id)


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def add_comment(
    order_id: str,
    comment_data: CommentCreate,
    comment_service: CommentService = Depends(get_comment_service),
):
    return comment_service.add_comment(
        order_id, comment_data.author, comment_data.text
    )
