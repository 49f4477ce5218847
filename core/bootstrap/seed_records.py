"""
Seed data and reset for the record store.

reset() rewrites the three seed records and empties the operation log.
Records added later are left alone.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from exceptions.exceptions import ResetException
from runtime.store.log_store import LogStore
from runtime.store.record_store import RecordStore


logger = logging.getLogger(__name__)


SEED_RECORDS: Dict[str, Dict[str, Any]] = {
    "andrew.json": {
        "firstname": "Andrew",
        "lastname": "Maney",
        "email": "amaney@talentpath.com",
    },
    "scott.json": {
        "firstname": "Scott",
        "lastname": "Roberts",
        "email": "sroberts@talentpath.com",
        "username": "scoot",
    },
    "post.json": {
        "title": "Async/Await lesson",
        "description": "How to write asynchronous JavaScript",
        "date": "July 15, 2019",
    },
}


async def reset(store: RecordStore, log_store: LogStore) -> None:
    """
    Write every seed record and truncate the log, concurrently.

    Waits for all four writes to finish. If any of them failed, raises
    ResetException naming each failed target.
    """
    await asyncio.to_thread(store.ensure_dir)

    targets = list(SEED_RECORDS) + [str(log_store.log_path)]
    writes = [
        asyncio.to_thread(store.write_record, file, dict(record))
        for file, record in SEED_RECORDS.items()
    ]
    writes.append(asyncio.to_thread(log_store.truncate))

    outcomes = await asyncio.gather(*writes, return_exceptions=True)
    failures = {
        target: outcome
        for target, outcome in zip(targets, outcomes)
        if isinstance(outcome, Exception)
    }
    if failures:
        logger.error("reset failed for %s", ", ".join(failures))
        raise ResetException(failures)
