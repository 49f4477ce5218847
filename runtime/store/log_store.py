"""
LogStore: append-only operation log for recdb.

Every operation writes one line to:

    log.txt

in the form "<message> <epoch-millis>", e.g.

    sroberts@talentpath.com 1563221866619
    scott.json succesfully deleted 1563221866620
"""

import logging
import time
from pathlib import Path
from typing import List

from ..models.record_models import LogEntry


logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class LogStore:
    """Append-only text log of operation outcomes."""

    def __init__(self, log_path: str = "log.txt"):
        self.log_path = Path(log_path)

    def append(self, message: str) -> None:
        """
        Append a timestamped line to the log.

        CR/LF in the message are escaped so every entry stays on one line,
        and characters that cannot be encoded are written as backslash
        escapes. The log is best-effort: failures are reported on the
        module logger and never raised to the caller.
        """
        message = message.replace("\r", "\\r").replace("\n", "\\n")
        line = f"{message} {now_ms()}\n"
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with self.log_path.open("a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(line)
        except (OSError, ValueError) as exc:
            logger.warning("Could not append to %s: %s", self.log_path, exc)

    def truncate(self) -> None:
        """Empty the log. Unlike append, failures are raised."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_path.write_text("", encoding="utf-8")

    def entries(self) -> List[LogEntry]:
        """Parse the log; lines that are not '<message> <epoch-ms>' are skipped."""
        if not self.log_path.exists():
            return []
        results: List[LogEntry] = []
        with self.log_path.open("r", encoding="utf-8", errors="replace") as f:
            for lineno, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    results.append(LogEntry.parse_line(raw))
                except ValueError:
                    logger.warning("Skipping malformed line %d in %s", lineno, self.log_path)
        return results
