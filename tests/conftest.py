import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest  # noqa: E402

from venue_dashboard.main import app  # noqa: E402
from venue_dashboard.store.record_store import RecordStore, get_record_store  # noqa: E402


@pytest.fixture
def record_store():
    store = RecordStore.from_url("sqlite:///:memory:")
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def store_override(record_store):
    app.dependency_overrides[get_record_store] = lambda: record_store
    yield record_store
    app.dependency_overrides.pop(get_record_store, None)
