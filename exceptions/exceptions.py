"""
Custom exceptions for the recdb record store.

These exceptions are intentionally simple and descriptive.
They are used across:

  - runtime/store/
  - core/operations/
  - core/bootstrap/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""


class RecordStoreError(Exception):
    """Base class for every failure raised by the record store."""

    def __init__(self, file, msg):
        self.file = file
        super().__init__(msg)


class RecordNotFoundException(RecordStoreError):
    """
    Raised when a record file does not exist (or cannot be opened) in the
    store directory.
    """

    def __init__(self, file, details=None):
        self.details = details
        msg = f"no such file or directory {file}"
        if details:
            msg = f"{msg} ({details})"
        super().__init__(file, msg)


class RecordParseException(RecordStoreError):
    """
    Raised when a record file exists but does not hold a JSON object.

    Example:
        {"firstname": "Scott"}   ← expected
        [1, 2, 3] / not json     ← raises this exception
    """

    def __init__(self, file, details=None):
        self.details = details or "Invalid JSON object."
        msg = f"Parse error for record: {file}\nDetails: {self.details}"
        super().__init__(file, msg)


class RecordKeyException(RecordStoreError):
    """
    Raised when a key is missing from a record, or holds a falsy value
    where a real value is required.
    """

    def __init__(self, file, key):
        self.key = key
        super().__init__(file, f"{key} invalid key on {file}")


class RecordWriteException(RecordStoreError):
    """Raised when writing or unlinking a record file fails."""

    def __init__(self, file, details=None):
        self.details = details
        msg = f"Write error for record: {file}"
        if details:
            msg = f"{msg}\nDetails: {details}"
        super().__init__(file, msg)


class RecordExistsException(RecordStoreError):
    """Raised when creating a record that is already present."""

    def __init__(self, file):
        super().__init__(file, f"{file} already exists")


class ResetException(RecordStoreError):
    """
    Raised by reset() after every seed write has finished, when one or
    more of them failed.

    The exception contains a mapping of target -> underlying exception.
    """

    def __init__(self, failures):
        self.failures = failures
        msg = (
            "Reset failed for: "
            + ", ".join(f"{target} ({err})" for target, err in failures.items())
        )
        super().__init__(", ".join(failures), msg)
