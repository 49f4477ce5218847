"""RecordService implementation.

Responsible for:
- holding the store configuration (record directory, log sink, behaviour
  switches) and passing it to every operation
- running the operation and writing its outcome to the operation log
- returning the OperationResult to the caller

This is the only place that writes the operation log. No method raises,
except reset(), which surfaces failed seed writes as ResetException.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional

from configs.settings import Settings, REMOVE_MISSING_KEY_CHOICES
from core.bootstrap import seed_records
from core.operations import record_operations

from ..models.record_models import LogEntry, OperationResult
from ..store.log_store import LogStore
from ..store.record_store import RecordStore


class RecordService:
    """Public operation surface of recdb.

    Parameters
    ----------
    store:
        RecordStore rooted at the store directory.
    log_store:
        LogStore that receives one line per operation.
    merge_filename:
        File name (inside the store directory) that merge_data() writes.
    remove_missing_key:
        "ignore" (removing an absent key succeeds) or "error".
    set_creates_missing:
        If true, set() on a missing record creates it.
    """

    def __init__(
        self,
        store: RecordStore,
        log_store: LogStore,
        merge_filename: str = "merge.json",
        remove_missing_key: str = "ignore",
        set_creates_missing: bool = False,
    ) -> None:
        if remove_missing_key not in REMOVE_MISSING_KEY_CHOICES:
            raise ValueError(f"Unknown remove_missing_key policy: {remove_missing_key}")
        self.store = store
        self.log_store = log_store
        self.merge_filename = merge_filename
        self.remove_missing_key = remove_missing_key
        self.set_creates_missing = set_creates_missing

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        store_dir: Optional[str] = None,
        log_path: Optional[str] = None,
    ) -> "RecordService":
        """Build a service from Settings; explicit paths override it."""
        return cls(
            store=RecordStore(store_dir or str(settings.store_dir)),
            log_store=LogStore(log_path or str(settings.log_path)),
            merge_filename=settings.merge_filename,
            remove_missing_key=settings.remove_missing_key,
            set_creates_missing=settings.set_creates_missing,
        )

    async def _log(self, result: OperationResult) -> OperationResult:
        await asyncio.to_thread(self.log_store.append, result.message)
        return result

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get(self, file: str, key: str) -> OperationResult:
        return await self._log(await record_operations.get_value(self.store, file, key))

    async def set(self, file: str, key: str, value: Any) -> OperationResult:
        return await self._log(
            await record_operations.set_value(
                self.store, file, key, value, create_missing=self.set_creates_missing
            )
        )

    async def remove(self, file: str, key: str) -> OperationResult:
        return await self._log(
            await record_operations.remove_key(
                self.store, file, key, missing_key=self.remove_missing_key
            )
        )

    async def delete_file(self, file: str) -> OperationResult:
        return await self._log(await record_operations.delete_file(self.store, file))

    async def create_file(self, file: str) -> OperationResult:
        return await self._log(await record_operations.create_file(self.store, file))

    async def merge_data(self) -> OperationResult:
        return await self._log(
            await record_operations.merge_data(self.store, self.merge_filename)
        )

    async def union(self, file_a: str, file_b: str) -> OperationResult:
        return await self._log(await record_operations.union(self.store, file_a, file_b))

    async def intersect(self, file_a: str, file_b: str) -> OperationResult:
        return await self._log(
            await record_operations.intersect(self.store, file_a, file_b)
        )

    async def difference(self, file_a: str, file_b: str) -> OperationResult:
        return await self._log(
            await record_operations.difference(self.store, file_a, file_b)
        )

    async def reset(self) -> None:
        await seed_records.reset(self.store, self.log_store)

    def entries(self) -> List[LogEntry]:
        return self.log_store.entries()
