"""Module logs: per-category bounded log buffers shown on the dashboard."""
#
# PURPOSE:
# Each scenario writes its progress lines into its own category. The
# dashboard polls /api/logs/<category> and renders whatever is retained.
#
# KEY CONCEPTS:
# - Bounded: collections.deque with maxlen, oldest entries fall off first
# - Immutable entries: a LogEntry never changes after it is appended
# - Operational echo: every entry is also written to the Python logger,
#   so the server console shows the same story as the browser
#

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from threading import Lock
from typing import Any, Deque, Dict, List, Union

from dockdemo.base.sequence import LogSequence
from dockdemo.errors import CategoryNotFound

logger = logging.getLogger(__name__)

# Entries retained per category
MAX_LOG_ENTRIES = 50


class LogCategory(str, Enum):
    ORCHESTRATION = "orchestration"
    DEPLOYMENT = "deployment"
    SECURITY = "security"
    PERFORMANCE = "performance"
    NETWORK = "network"
    STORAGE = "storage"

    @classmethod
    def parse(cls, value: Union[str, "LogCategory"]) -> "LogCategory":
        """Resolve a category name, raising CategoryNotFound for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise CategoryNotFound(str(value)) from None


class LogType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    message: str
    type: LogType
    id: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "message": self.message,
            "type": self.type.value,
            "id": self.id,
        }


def _iso_now() -> str:
    # Millisecond precision with a Z suffix, the format browsers' Date expects
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class LogStore:
    """
    One ring buffer of LogEntry per LogCategory.

    Thread-safe: appends and reads take the same lock, so a reader never
    sees a buffer halfway through an eviction.
    """

    def __init__(self, max_entries: int = MAX_LOG_ENTRIES):
        self.max_entries = max_entries
        self._logs: Dict[LogCategory, Deque[LogEntry]] = {
            category: deque(maxlen=max_entries) for category in LogCategory
        }
        self._lock = Lock()

    def append(
        self,
        category: Union[str, LogCategory],
        message: str,
        type: Union[str, LogType] = LogType.INFO,
    ) -> LogEntry:
        """
        Record one log line under ``category``.

        Args:
            category: Category the line belongs to
            message: Text shown on the dashboard
            type: info, success or error

        Returns:
            The entry that was stored
        """
        cat = LogCategory.parse(category)
        entry = LogEntry(
            timestamp=_iso_now(),
            message=message,
            type=LogType(type),
            id=LogSequence.instance().next_id(),
        )

        with self._lock:
            # deque(maxlen=...) evicts from the left once full
            self._logs[cat].append(entry)

        level = logging.ERROR if entry.type is LogType.ERROR else logging.INFO
        logger.log(level, f"[{cat.value.upper()}] {message}")
        return entry

    def get(self, category: Union[str, LogCategory]) -> List[LogEntry]:
        """Return the retained entries for ``category``, oldest first."""
        cat = LogCategory.parse(category)
        with self._lock:
            return list(self._logs[cat])

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        with self._lock:
            return {
                cat.value: [entry.to_dict() for entry in entries]
                for cat, entries in self._logs.items()
            }
