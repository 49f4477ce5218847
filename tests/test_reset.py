import asyncio
import json

import pytest

from core.bootstrap.seed_records import SEED_RECORDS, reset
from exceptions.exceptions import RecordWriteException, ResetException


def test_reset_writes_seed_records_and_empties_log(store, log_store):
    log_store.append("old entry")
    asyncio.run(reset(store, log_store))

    assert store.list_records() == ["andrew.json", "post.json", "scott.json"]
    for file, record in SEED_RECORDS.items():
        assert json.loads((store.store_dir / file).read_text()) == record
    assert log_store.log_path.read_text() == ""


def test_reset_creates_store_directory(tmp_path, log_store):
    from runtime.store.record_store import RecordStore

    fresh = RecordStore(str(tmp_path / "fresh" / "db"))
    asyncio.run(reset(fresh, log_store))
    assert fresh.exists("scott.json")


def test_reset_leaves_added_records_alone(store, log_store):
    store.write_record("extra.json", {"k": "v"})
    asyncio.run(reset(store, log_store))
    assert store.read_record("extra.json") == {"k": "v"}


def test_reset_restores_mutated_seed(store, log_store):
    asyncio.run(reset(store, log_store))
    store.write_record("scott.json", {"firstname": "Changed"})
    asyncio.run(reset(store, log_store))
    assert store.read_record("scott.json") == SEED_RECORDS["scott.json"]


def test_reset_surfaces_failed_write_after_finishing_the_rest(store, log_store):
    (store.store_dir / "post.json").mkdir()
    log_store.append("old entry")

    with pytest.raises(ResetException) as info:
        asyncio.run(reset(store, log_store))

    assert list(info.value.failures) == ["post.json"]
    assert isinstance(info.value.failures["post.json"], RecordWriteException)
    assert store.read_record("scott.json") == SEED_RECORDS["scott.json"]
    assert store.read_record("andrew.json") == SEED_RECORDS["andrew.json"]
    assert log_store.log_path.read_text() == ""


def test_seed_records_are_not_mutated_by_writes(store, log_store):
    asyncio.run(reset(store, log_store))
    assert SEED_RECORDS["scott.json"]["username"] == "scoot"
