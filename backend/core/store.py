# backend/core/store.py

"""
Store: the persistence contract used by every service.

A ``Store`` wraps one SQLAlchemy session. Services receive it at
construction time (see the ``get_*_service`` route dependencies) and never
reach for a module-level session.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence, Type, TypeVar

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from .database import get_db
from .exceptions import InternalError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store:
    """CRUD, filtered queries and a scoped unit of work over one session."""

    def __init__(self, session: Session):
        self.session = session
        self._depth = 0

    def _query(self, model: Type[T], include_deleted: bool = False) -> Query:
        query = self.session.query(model)
        if not include_deleted and hasattr(model, "deleted_at"):
            query = query.filter(model.deleted_at.is_(None))
        return query

    def find(
        self,
        model: Type[T],
        *criteria,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        options: Optional[Sequence[Any]] = None,
        include_deleted: bool = False,
    ) -> List[T]:
        query = self._query(model, include_deleted).filter(*criteria)
        if options:
            query = query.options(*options)
        if order_by:
            query = query.order_by(*order_by)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, model: Type[T], *criteria, include_deleted: bool = False) -> int:
        return self._query(model, include_deleted).filter(*criteria).count()

    def get(
        self,
        model: Type[T],
        entity_id: Any,
        options: Optional[Sequence[Any]] = None,
        include_deleted: bool = False,
    ) -> T:
        query = self._query(model, include_deleted).filter(model.id == entity_id)
        if options:
            query = query.options(*options)
        entity = query.first()
        if entity is None:
            raise NotFoundError(model.__name__, entity_id)
        return entity

    def create(self, entity: T) -> T:
        """Add an entity and flush so database defaults and ids are assigned."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def update(self, model: Type[T], entity_id: Any, values: Dict[str, Any]) -> int:
        """Update a live row in place and return the number of rows affected."""
        return self.update_where(model, values, model.id == entity_id)

    def update_where(self, model: Type[T], values: Dict[str, Any], *criteria) -> int:
        return (
            self._query(model)
            .filter(*criteria)
            .update(values, synchronize_session="fetch")
        )

    def delete(self, model: Type[T], entity_id: Any) -> int:
        return self.delete_where(model, model.id == entity_id)

    def delete_where(self, model: Type[T], *criteria) -> int:
        return (
            self.session.query(model)
            .filter(*criteria)
            .delete(synchronize_session="fetch")
        )

    def soft_delete(self, model: Type[T], entity_id: Any) -> int:
        return self.update(model, entity_id, {"deleted_at": datetime.utcnow()})

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """
        Scoped unit of work: commit on success, roll back on any failure.

        Nested uses join the outermost unit, so a service method that opens a
        transaction can safely call another one that does the same.

        Example:
            with store.transaction():
                store.create(order)
                store.create(order_item)
        """
        if self._depth:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield self
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Store transaction failed, rolled back: {str(e)}")
            raise InternalError() from e
        except Exception:
            self.session.rollback()
            raise
        finally:
            self._depth = 0


def get_store(db: Session = Depends(get_db)) -> Store:
    """Dependency to get a store bound to the request session"""
    return Store(db)
