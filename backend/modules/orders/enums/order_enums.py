from enum import Enum


class WorkItemStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    READY = "ready"
    SERVED = "served"


class CommentAuthor(str, Enum):
    CASHIER = "cashier"
    MASTER = "master"
    SERVE = "serve"
    OTHERS = "others"


class DiscountOrderStatus(str, Enum):
    AVAILABLE = "available"
    ALREADY_USED = "already_used"
    UNSERVED = "unserved"
