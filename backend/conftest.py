"""
Pytest configuration file for backend testing.
"""
import os
import sys
from pathlib import Path

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Keep the application engine in memory while tests run
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from core.store import Store  # noqa: E402

# Import all models to register them with SQLAlchemy
from modules.catalog.models import catalog_models  # noqa: E402,F401
from modules.orders.models import order_models  # noqa: E402,F401
from modules.catalog.tests.factories import ItemFactory, ItemTypeFactory  # noqa: E402

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store(db_session):
    return Store(db_session)


@pytest.fixture(autouse=True)
def bind_factories(request):
    """Point the factories at the test session when a test uses one."""
    if "db_session" not in request.fixturenames:
        yield
        return
    db_session = request.getfixturevalue("db_session")
    for factory_class in (ItemTypeFactory, ItemFactory):
        factory_class._meta.sqlalchemy_session = db_session
    yield
    for factory_class in (ItemTypeFactory, ItemFactory):
        factory_class._meta.sqlalchemy_session = None


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""
    from app.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
