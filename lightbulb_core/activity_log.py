"""
Activity Log -- append-only record of lightbulb transitions.

Each successful state change writes exactly one line:

    [2026-10-17T09:41:07.123456+00:00] Lightbulb turned ON

The file is opened in append/create mode for every write. There is no
rotation or truncation; the log grows for the lifetime of the install.
Callers serialise writes (the bulb lock is held while appending).
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = "lightbulb.log"

ACTION_ON = "ON"
ACTION_OFF = "OFF"


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class ActivityLogError(Exception):
    """Raised when the activity log cannot be written or read."""


@dataclass(frozen=True)
class LogEntry:
    """One transition record."""

    timestamp: str
    message: str

    @staticmethod
    def for_action(action: str, timestamp: Optional[str] = None) -> "LogEntry":
        return LogEntry(
            timestamp=timestamp or _now_rfc3339(),
            message=f"Lightbulb turned {action}",
        )

    @staticmethod
    def parse(line: str) -> Optional["LogEntry"]:
        """Parse a ``[<ts>] <message>`` line; None if it is not one."""
        line = line.strip()
        if not line.startswith("[") or "]" not in line:
            return None
        ts, _, rest = line[1:].partition("]")
        return LogEntry(timestamp=ts, message=rest.strip())

    def format(self) -> str:
        return f"[{self.timestamp}] {self.message}"


class ActivityLog:
    """Interface shared by the file and in-memory sinks."""

    def append(self, action: str) -> LogEntry:
        raise NotImplementedError

    def read(self) -> str:
        raise NotImplementedError


class FileActivityLog(ActivityLog):
    """Durable sink writing to a text file."""

    def __init__(self, path: str = DEFAULT_LOG_PATH):
        self.path = path

    def append(self, action: str) -> LogEntry:
        entry = LogEntry.for_action(action)
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(entry.format() + "\n")
        except (OSError, ValueError) as exc:
            logger.error("Could not append to activity log %s: %s", self.path, exc)
            raise ActivityLogError(str(exc)) from exc
        logger.debug("Activity log: %s", entry.format())
        return entry

    def read(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ActivityLogError(str(exc)) from exc


class InMemoryActivityLog(ActivityLog):
    """Non-durable sink, handy for tests."""

    def __init__(self):
        self.entries: deque[LogEntry] = deque()

    def append(self, action: str) -> LogEntry:
        entry = LogEntry.for_action(action)
        self.entries.append(entry)
        return entry

    def read(self) -> str:
        return "".join(entry.format() + "\n" for entry in self.entries)
