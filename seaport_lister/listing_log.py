"""Append-only listing log with an operator-facing echo."""

import sys
from datetime import datetime, timezone
from pathlib import Path


class ListingLog:
    """Line-oriented log of every listing attempt.

    Each entry is written as ``[ISO-8601 timestamp] message``. The file is
    opened in append mode per entry, so an interrupted run keeps every line
    written so far.

    Args:
        path: File to append to. Parent directories are created on demand.

    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def append(self, message: str) -> None:
        """Append one timestamped entry to the log file."""
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as log_file:
            log_file.write(f"[{timestamp}] {message}\n")

    def record(self, message: str, error: bool = False) -> None:
        """Print a message for the operator and append it to the log.

        Args:
            message: The message to record.
            error: Print to stderr instead of stdout.

        """
        print(message, file=sys.stderr if error else sys.stdout)
        self.append(message)
