"""
In-memory state of the demo: the per-category log store and the counters
the dashboard displays.
"""
from dockdemo.state.logs import LogCategory, LogEntry, LogStore, LogType, MAX_LOG_ENTRIES
from dockdemo.state.system import StateHolder, SystemState

__all__ = [
    "LogCategory",
    "LogEntry",
    "LogStore",
    "LogType",
    "MAX_LOG_ENTRIES",
    "StateHolder",
    "SystemState",
]
