"""
Centralized Test Configuration.
"""

import random
from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool

from parcel_tracker.app.db.session import Base, create_db_engine, open_engine
from parcel_tracker.app.models.parcel import ParcelRecord  # noqa: F401
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import Parcel
from parcel_tracker.app.services.parcel_service import ParcelService
from parcel_tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite://"

engine = create_db_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

RANDOM_SEED = 20240131


@pytest.fixture
def make_parcel():
    """Factory for fresh registered parcels that are not stored yet."""
    def _make_parcel(client: int = 1000) -> Parcel:
        return Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address="test",
            created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        )
    return _make_parcel


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test function and drop after."""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db_engine():
    return engine


@pytest.fixture
def store(db_engine):
    return ParcelStore(db_engine)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture
def rng():
    """Locally seeded generator for random client ids."""
    return random.Random(RANDOM_SEED)


@pytest.fixture
def file_engine(tmp_path):
    """File-backed engine with a real connection pool, for threaded tests."""
    with open_engine(f"sqlite:///{tmp_path / 'tracker.db'}") as file_db:
        yield file_db
