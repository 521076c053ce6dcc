import logging
from typing import List, Optional, Tuple

from core.exceptions import ValidationError
from core.store import Store
from ..enums.order_enums import CommentAuthor
from ..models.order_models import Comment, Order

logger = logging.getLogger(__name__)

COMMENT_AUTHORS = {author.value for author in CommentAuthor}


def validate_comment(author: Optional[str], text: Optional[str]) -> Tuple[str, str]:
    """Return the normalised (author, text) pair or raise ValidationError"""
    author = (author or "").strip()
    if author not in COMMENT_AUTHORS:
        raise ValidationError(
            f"Unknown comment author '{author}'",
            details={"allowed": sorted(COMMENT_AUTHORS)},
        )
    if not (text or "").strip():
        raise ValidationError("Comment text must not be empty")
    return author, text


class CommentService:
    """Append-only notes attached to an order"""

    def __init__(self, store: Store):
        self.store = store

    def list_comments(self, order_id: str) -> List[Comment]:
        self.store.get(Order, order_id)
        return self.store.find(
            Comment,
            Comment.order_id == order_id,
            order_by=[Comment.created_at.desc()],
        )

    def add_comment(self, order_id: str, author: str, text: str) -> Comment:
        self.store.get(Order, order_id)
        author, text = validate_comment(author, text)

        with self.store.transaction():
            comment = self.store.create(
                Comment(order_id=order_id, author=author, text=text)
            )
            comment_id = comment.id

        logger.info(f"Added {author} comment {comment_id} to order {order_id}")
        return self.store.get(Comment, comment_id)
