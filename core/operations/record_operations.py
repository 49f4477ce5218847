"""
Record operations: get / set / remove / create / delete / merge and the
key-set comparisons.

Every operation is a coroutine that runs its filesystem calls through
asyncio.to_thread, catches RecordStoreError and returns an
OperationResult. Nothing here writes the operation log; callers log
``result.message`` (see runtime/service/record_service.py).

Log wording is kept byte-compatible with the existing log.txt history,
including its spelling ("succesfully", "deleteing").
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

from exceptions.exceptions import (
    RecordExistsException,
    RecordKeyException,
    RecordNotFoundException,
    RecordParseException,
    RecordStoreError,
    RecordWriteException,
)
from runtime.models.record_models import ErrorKind, OperationResult
from runtime.store.record_store import RecordStore

from .key_sets import difference_keys, intersect_keys, union_keys


logger = logging.getLogger(__name__)


_ERROR_KINDS = {
    RecordNotFoundException: ErrorKind.NOT_FOUND,
    RecordParseException: ErrorKind.PARSE_ERROR,
    RecordKeyException: ErrorKind.KEY_ERROR,
    RecordWriteException: ErrorKind.WRITE_ERROR,
    RecordExistsException: ErrorKind.ALREADY_EXISTS,
}


def _error_kind(exc: RecordStoreError) -> ErrorKind:
    for exc_type, kind in _ERROR_KINDS.items():
        if isinstance(exc, exc_type):
            return kind
    return ErrorKind.WRITE_ERROR


def format_value(value: Any) -> str:
    """Render a JSON value the way it appears in the log."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def is_falsy(value: Any) -> bool:
    """JSON truthiness: null, false, 0 and "" are falsy; containers are not."""
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return value == ""


# ---------------------------------------------------------------------------
# Single-record operations
# ---------------------------------------------------------------------------


async def get_value(store: RecordStore, file: str, key: str) -> OperationResult:
    """Look up record[key]; the success message is the value itself."""
    try:
        record = await asyncio.to_thread(store.read_record, file)
    except RecordStoreError as exc:
        logger.debug("get %s failed: %s", file, exc)
        return OperationResult.failure(
            "get", f"ERROR no such file or directory {file}", _error_kind(exc)
        )

    value = record.get(key)
    if is_falsy(value):
        return OperationResult.failure(
            "get", f"ERROR {key} invalid key on {file}", ErrorKind.KEY_ERROR
        )
    return OperationResult.success("get", format_value(value), data=value)


async def set_value(
    store: RecordStore,
    file: str,
    key: str,
    value: Any,
    create_missing: bool = False,
) -> OperationResult:
    """Set record[key] = value and rewrite the record.

    A missing file is an error unless create_missing is set, in which case
    the record starts out empty.
    """
    rendered = format_value(value)
    try:
        try:
            record = await asyncio.to_thread(store.read_record, file)
        except RecordNotFoundException:
            if not create_missing:
                raise
            record = {}
        record[key] = value
        await asyncio.to_thread(store.write_record, file, record)
    except RecordStoreError as exc:
        logger.debug("set %s[%s] failed: %s", file, key, exc)
        return OperationResult.failure(
            "set",
            f"ERROR writing to setting {key}: {rendered} on {file}",
            _error_kind(exc),
        )
    return OperationResult.success(
        "set", f"{key}: {rendered} successfully added to {file}"
    )


async def remove_key(
    store: RecordStore,
    file: str,
    key: str,
    missing_key: str = "ignore",
) -> OperationResult:
    """Delete record[key] and rewrite the record.

    With missing_key="ignore" an absent key still rewrites the record and
    succeeds; with missing_key="error" it fails without writing.
    """
    try:
        record = await asyncio.to_thread(store.read_record, file)
        if key in record:
            del record[key]
        elif missing_key == "error":
            raise RecordKeyException(file, key)
        await asyncio.to_thread(store.write_record, file, record)
    except RecordStoreError as exc:
        logger.debug("remove %s[%s] failed: %s", file, key, exc)
        return OperationResult.failure(
            "remove", f"ERROR deleteing {key} on {file}", _error_kind(exc)
        )
    return OperationResult.success("remove", f"{key} successfully deleted from {file}")


async def delete_file(store: RecordStore, file: str) -> OperationResult:
    try:
        await asyncio.to_thread(store.delete_record, file)
    except RecordNotFoundException:
        return OperationResult.failure(
            "deleteFile", f"ERROR: {file} does not exist", ErrorKind.NOT_FOUND
        )
    except RecordStoreError as exc:
        logger.debug("deleteFile %s failed: %s", file, exc)
        return OperationResult.failure(
            "deleteFile", f"ERROR: {file} not deleted", _error_kind(exc)
        )
    return OperationResult.success("deleteFile", f"{file} succesfully deleted")


async def create_file(store: RecordStore, file: str) -> OperationResult:
    """Create a record holding {}; an existing file is left untouched."""
    try:
        await asyncio.to_thread(store.create_record, file)
    except RecordExistsException:
        return OperationResult.failure(
            "createFile",
            f"ERROR: {file} already exists, cannot create",
            ErrorKind.ALREADY_EXISTS,
        )
    except RecordStoreError as exc:
        logger.debug("createFile %s failed: %s", file, exc)
        return OperationResult.failure(
            "createFile", f"ERROR: {file} not created", _error_kind(exc)
        )
    return OperationResult.success("createFile", f"{file} succesfully created")


# ---------------------------------------------------------------------------
# Whole-store operations
# ---------------------------------------------------------------------------


async def merge_data(store: RecordStore, merge_filename: str = "merge.json") -> OperationResult:
    """Write {file stem: record} for every record into merge_filename.

    Records are read concurrently and every read is awaited before the
    outcome is decided. If any read fails nothing is written.
    """
    try:
        files = await asyncio.to_thread(store.list_records, (merge_filename,))
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(store.read_record, file) for file in files),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        merged = {Path(file).stem: record for file, record in zip(files, outcomes)}
        await asyncio.to_thread(store.write_record, merge_filename, merged)
    except RecordStoreError as exc:
        logger.debug("mergeData failed: %s", exc)
        return OperationResult.failure(
            "mergeData", "ERROR merged unsuccessfully wrote", _error_kind(exc)
        )
    return OperationResult.success("mergeData", "Merged successfully wrote", data=files)


async def _compare_keys(
    operation: str,
    store: RecordStore,
    file_a: str,
    file_b: str,
    combine: Callable[[Dict[str, Any], Dict[str, Any]], List[str]],
) -> OperationResult:
    records = []
    for file in (file_a, file_b):
        try:
            records.append(await asyncio.to_thread(store.read_record, file))
        except RecordStoreError as exc:
            logger.debug("%s %s failed: %s", operation, file, exc)
            return OperationResult.failure(
                operation, f"ERROR no such file or directory {file}", _error_kind(exc)
            )
    keys = combine(records[0], records[1])
    return OperationResult.success(operation, json.dumps(keys), data=keys)


async def union(store: RecordStore, file_a: str, file_b: str) -> OperationResult:
    return await _compare_keys("union", store, file_a, file_b, union_keys)


async def intersect(store: RecordStore, file_a: str, file_b: str) -> OperationResult:
    return await _compare_keys("intersect", store, file_a, file_b, intersect_keys)


async def difference(store: RecordStore, file_a: str, file_b: str) -> OperationResult:
    return await _compare_keys("difference", store, file_a, file_b, difference_keys)
