"""RecordStore: reads and writes flat JSON record files.

Expected layout (by convention):

    <store_dir>/<name>.json

Each file holds a single JSON object, e.g.

    {
      "firstname": "Scott",
      "lastname": "Roberts",
      "email": "sroberts@talentpath.com"
    }

This store provides a simple synchronous API:

    read_record(file) -> dict
    write_record(file, mapping) -> None

and hides the details of locating, parsing and serializing the files.
There is no cache: every call goes to disk.

Writes overwrite the target in place. There is no temp-file/rename step,
so a crash mid-write can leave a truncated record behind.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from exceptions.exceptions import (
    RecordExistsException,
    RecordNotFoundException,
    RecordParseException,
    RecordWriteException,
)


class RecordStore:
    """Read/write access to the JSON record files in a directory.

    Parameters
    ----------
    store_dir:
        Directory that holds the record files. Record names passed to the
        methods are file names relative to this directory, e.g.
        "scott.json".
    """

    def __init__(self, store_dir: str = "db") -> None:
        self.store_dir = Path(store_dir)

    def _record_path(self, file: str) -> Path:
        """Return the path of the given record file."""
        return self.store_dir / file

    def ensure_dir(self) -> None:
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def exists(self, file: str) -> bool:
        return self._record_path(file).is_file()

    def read_record(self, file: str) -> Dict[str, Any]:
        """Load and parse a record.

        Raises
        ------
        RecordNotFoundException
            If the file does not exist or cannot be opened.
        RecordParseException
            If the content is not valid JSON, or not a JSON object.
        """
        path = self._record_path(file)
        try:
            with path.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise RecordNotFoundException(file, details=exc.strerror) from exc
        except UnicodeDecodeError as exc:
            raise RecordParseException(file, details=str(exc)) from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RecordParseException(file, details=str(exc)) from exc

        if not isinstance(data, dict):
            raise RecordParseException(
                file, details=f"expected object, got {type(data).__name__}"
            )
        return data

    def _encode(self, file: str, record: Dict[str, Any]) -> bytes:
        """Serialize a record to UTF-8 JSON bytes.

        Lone surrogates (valid as JSON escapes, not as UTF-8) are kept by
        falling back to ASCII-escaped output.
        """
        try:
            text = json.dumps(record, ensure_ascii=False, allow_nan=False)
            try:
                return text.encode("utf-8")
            except UnicodeEncodeError:
                return json.dumps(record, ensure_ascii=True, allow_nan=False).encode("ascii")
        except (TypeError, ValueError) as exc:
            raise RecordWriteException(file, details=str(exc)) from exc

    def write_record(self, file: str, record: Dict[str, Any]) -> None:
        """Serialize the record and overwrite the file completely.

        The record is fully encoded before the file is opened, so a
        serialization failure leaves the existing content untouched.
        """
        data = self._encode(file, record)
        path = self._record_path(file)
        try:
            with path.open("wb") as f:
                f.write(data)
        except OSError as exc:
            raise RecordWriteException(file, details=exc.strerror) from exc

    def create_record(self, file: str) -> None:
        """Create a record holding {}; never overwrites an existing file.

        Raises RecordExistsException if the file is already present and
        RecordWriteException for any other failure.
        """
        data = self._encode(file, {})
        try:
            with self._record_path(file).open("xb") as f:
                f.write(data)
        except FileExistsError as exc:
            raise RecordExistsException(file) from exc
        except OSError as exc:
            raise RecordWriteException(file, details=exc.strerror) from exc

    def delete_record(self, file: str) -> None:
        """Unlink a record file.

        Raises RecordNotFoundException when the file is absent and
        RecordWriteException for any other unlink failure.
        """
        try:
            self._record_path(file).unlink()
        except FileNotFoundError as exc:
            raise RecordNotFoundException(file) from exc
        except OSError as exc:
            raise RecordWriteException(file, details=exc.strerror) from exc

    def list_records(self, exclude: Iterable[str] = ()) -> List[str]:
        """Return the sorted names of all *.json records in the store.

        Raises RecordNotFoundException if the store directory is missing.
        """
        skipped = set(exclude)
        try:
            paths = list(self.store_dir.iterdir())
        except OSError as exc:
            raise RecordNotFoundException(str(self.store_dir), details=exc.strerror) from exc
        return sorted(
            p.name
            for p in paths
            if p.suffix == ".json" and p.is_file() and p.name not in skipped
        )
