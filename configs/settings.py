from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


REMOVE_MISSING_KEY_CHOICES = ("ignore", "error")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class Settings:
    """
    Central configuration for recdb.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Store and log locations
        self._store_dir = Path(os.getenv("RECDB_STORE_DIR", "db"))
        self._log_path = Path(os.getenv("RECDB_LOG_PATH", "log.txt"))
        self._merge_filename = os.getenv("RECDB_MERGE_FILENAME", "merge.json")

        # Behaviour switches for the ambiguous operations
        self._remove_missing_key = os.getenv("RECDB_REMOVE_MISSING_KEY", "ignore")
        self._set_creates_missing = os.getenv("RECDB_SET_CREATES_MISSING", "false")

        # Diagnostics
        self._log_level = os.getenv("RECDB_LOG_LEVEL", "WARNING")

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def store_dir(self) -> Path:
        return self._store_dir

    @property
    def log_path(self) -> Path:
        return self._log_path

    @property
    def merge_filename(self) -> str:
        if not self._merge_filename.endswith(".json"):
            raise RuntimeError(
                "RECDB_MERGE_FILENAME must name a .json file, "
                f"got {self._merge_filename!r}."
            )
        return self._merge_filename

    # ------------------------------------------------------------------
    # Operation behaviour
    # ------------------------------------------------------------------

    @property
    def remove_missing_key(self) -> str:
        value = self._remove_missing_key.strip().lower()
        if value not in REMOVE_MISSING_KEY_CHOICES:
            raise RuntimeError(
                "RECDB_REMOVE_MISSING_KEY must be one of "
                f"{', '.join(REMOVE_MISSING_KEY_CHOICES)}, got {self._remove_missing_key!r}."
            )
        return value

    @property
    def set_creates_missing(self) -> bool:
        value = self._set_creates_missing.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise RuntimeError(
            f"RECDB_SET_CREATES_MISSING must be a boolean, got {self._set_creates_missing!r}."
        )

    @property
    def log_level(self) -> str:
        value = self._log_level.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise RuntimeError(
                f"RECDB_LOG_LEVEL must be a logging level name, got {self._log_level!r}."
            )
        return value


settings = Settings()
