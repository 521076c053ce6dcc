import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String


def generate_uuid() -> str:
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)


class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)


class SoftDeleteMixin:
    """Rows are tombstoned instead of removed so history keeps resolving."""
    deleted_at = Column(DateTime, nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
