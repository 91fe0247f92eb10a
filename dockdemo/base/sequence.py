"""
Log entry id source.

Every log entry gets an integer id from one process-wide counter. The
counter starts at the wall-clock time in milliseconds, so ids look like
timestamps to the dashboard, but two entries created in the same
millisecond still get different ids. The counter is not reset when the
system state is, so ids stay unique for the lifetime of the process.

USAGE:
    from dockdemo.base.sequence import LogSequence

    entry_id = LogSequence.instance().next_id()
"""

from __future__ import annotations

import threading
import time
from itertools import count
from typing import Optional


class LogSequence:
    """
    Monotonic id counter shared by every log store in the process.

    Thread Safety:
    - Singleton creation: protected by class-level lock
    - next_id(): atomic via itertools.count() (CPython GIL)
    """

    _instance: Optional[LogSequence] = None
    _lock = threading.Lock()

    def __init__(self, start: Optional[int] = None):
        if start is None:
            start = int(time.time() * 1000)
        self._counter = count(start=start)

    @classmethod
    def instance(cls) -> LogSequence:
        if cls._instance is None:
            with cls._lock:
                # Double-check after acquiring lock
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def next_id(self) -> int:
        return next(self._counter)

    @classmethod
    def reset_for_testing(cls, start: Optional[int] = None) -> None:
        """Drop the singleton; the next instance() starts from ``start``."""
        with cls._lock:
            cls._instance = cls(start) if start is not None else None
