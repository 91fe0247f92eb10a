from __future__ import annotations

import logging
import platform
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from dockdemo.server.state import ApplicationState, get_state

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


class ResetResponse(BaseModel):
    success: bool
    message: str


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _environment(app_state: ApplicationState) -> Dict[str, Any]:
    memory = psutil.Process().memory_info()
    return {
        "python_version": platform.python_version(),
        "platform": platform.system().lower(),
        "memory_usage": {"rss": memory.rss, "vms": memory.vms},
        "env": app_state.config.environment,
    }


@router.get("/health")
async def health_check(app_state: ApplicationState = Depends(get_state)):
    """Liveness probe for the hosting platform."""
    return {"status": "healthy", "timestamp": _timestamp(), "uptime": app_state.uptime}


@router.get("/api/status")
async def system_status(app_state: ApplicationState = Depends(get_state)):
    """Counters, every category's logs, and some facts about the process."""
    return {
        "status": "running",
        "uptime": app_state.uptime,
        "timestamp": _timestamp(),
        "system": app_state.holder.snapshot(),
        "environment": _environment(app_state),
    }


@router.post("/api/reset", response_model=ResetResponse)
async def reset_system(app_state: ApplicationState = Depends(get_state)):
    """
    Put the fake Docker host back to its baseline.

    Counters go to 3 containers, 2 images, 1 network, 0 tests passed, and
    every category's log is emptied.
    """
    app_state.holder.reset()
    return ResetResponse(success=True, message="System reset")
