# backend/core/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings
from .query_logger import setup_query_logging

DATABASE_URL = settings.database_url

# Create engine with optional echo for development
engine_kwargs = {
    "echo": settings.log_sql_queries,
    "pool_pre_ping": True,
}

if settings.is_sqlite:
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if DATABASE_URL in {"sqlite://", "sqlite:///:memory:"}:
        engine_kwargs["poolclass"] = StaticPool
else:
    engine_kwargs["pool_size"] = settings.db_pool_size
    engine_kwargs["max_overflow"] = settings.db_max_overflow

engine = create_engine(
    DATABASE_URL,
    **engine_kwargs,
)


def enable_sqlite_foreign_keys(target_engine):
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

# Setup query logging in development
setup_query_logging(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that are registered on the metadata."""
    # Import models here so they are registered on the metadata
    from modules.catalog.models import catalog_models  # noqa: F401
    from modules.orders.models import order_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
