import pytest

from core.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
    status_code_for,
)
from core.query_logger import QueryLogger
from modules.catalog.models.catalog_models import Item, ItemType


class TestStore:

    def test_get_missing_raises(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.get(ItemType, "missing")

        assert exc_info.value.details == {"resource": "ItemType", "identifier": "missing"}

    def test_soft_deleted_rows_hidden(self, store):
        with store.transaction():
            item_type = store.create(ItemType(name="coffee", display_name="Coffee"))
            item_type_id = item_type.id
        with store.transaction():
            assert store.soft_delete(ItemType, item_type_id) == 1

        assert store.find(ItemType) == []
        hidden = store.get(ItemType, item_type_id, include_deleted=True)
        assert hidden.is_deleted
        assert store.count(ItemType, include_deleted=True) == 1

    def test_update_missing_row_affects_nothing(self, store):
        with store.transaction():
            assert store.update(ItemType, "missing", {"name": "tea"}) == 0

    def test_nested_transaction_joins_outer(self, store, db_session):
        """An error in an inner unit rolls back the outer one too."""
        with pytest.raises(ValidationError):
            with store.transaction():
                store.create(ItemType(name="coffee", display_name=""))
                with store.transaction():
                    store.create(ItemType(name="milk", display_name=""))
                    raise ValidationError("rejected")

        assert db_session.query(ItemType).count() == 0

    def test_driver_failure_becomes_internal_error(self, store, db_session):
        """Foreign key violations surface as InternalError after rollback."""
        with pytest.raises(InternalError):
            with store.transaction():
                store.create(
                    Item(name="Latte", abbreviation="", price=450, key="",
                         item_type_id="missing")
                )

        assert db_session.query(Item).count() == 0
        # The store is usable again after the rollback
        with store.transaction():
            store.create(ItemType(name="coffee", display_name=""))
        assert store.count(ItemType) == 1


class TestErrorMapping:

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ValidationError("bad"), 400),
            (NotFoundError("Order", "x"), 404),
            (ConflictError("served"), 409),
            (InternalError(), 500),
            (DomainError("unknown"), 500),
        ],
    )
    def test_status_codes(self, error, expected):
        assert status_code_for(error) == expected

    def test_internal_error_message_is_generic(self):
        assert InternalError().message == "Internal error while accessing the store"


class TestQueryLogger:

    def test_slow_queries_counted(self):
        query_logger = QueryLogger()

        query_logger.record("SELECT 1", 0.0)
        query_logger.record("SELECT * FROM orders", query_logger.slow_query_threshold + 1)

        assert query_logger.query_stats["total_queries"] == 2
        assert query_logger.query_stats["slow_queries"] == 1

    def test_reset_stats(self):
        query_logger = QueryLogger()
        query_logger.record("SELECT 1", 0.5)

        query_logger.reset_stats()

        assert query_logger.query_stats == {
            "total_queries": 0,
            "slow_queries": 0,
            "total_time": 0.0,
        }
