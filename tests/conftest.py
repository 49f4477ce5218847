import asyncio

import pytest

from runtime.service.record_service import RecordService
from runtime.store.log_store import LogStore
from runtime.store.record_store import RecordStore


@pytest.fixture
def store(tmp_path):
    record_store = RecordStore(str(tmp_path / "db"))
    record_store.ensure_dir()
    return record_store


@pytest.fixture
def log_store(tmp_path):
    return LogStore(str(tmp_path / "log.txt"))


@pytest.fixture
def service(store, log_store):
    """A service over a freshly reset store."""
    svc = RecordService(store, log_store)
    asyncio.run(svc.reset())
    return svc
