import logging

from fastapi import APIRouter, Depends

from dockdemo.server.state import ApplicationState, get_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.get("/{category}")
async def fetch_logs(category: str, app_state: ApplicationState = Depends(get_state)):
    """Retained entries for one category, oldest first. Unknown categories are a 404."""
    entries = app_state.holder.current.logs.get(category)
    return [entry.to_dict() for entry in entries]
