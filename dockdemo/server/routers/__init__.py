"""
Router initialization module.

Exports all API routers for the dockdemo backend.
"""
from dockdemo.server.routers import logs, scenarios, system

__all__ = [
    "logs",
    "scenarios",
    "system",
]
