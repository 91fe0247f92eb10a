"""
Endpoints that run the scripted Docker scenarios.

Each request runs the whole script before answering, so a call takes as
long as the script's simulated delays add up to (about 4-20 seconds at the
default time scale).
"""

import logging

from fastapi import APIRouter, Depends

from dockdemo.engine.scenarios import get_scenario
from dockdemo.server.state import ApplicationState, get_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/test", tags=["scenarios"])


@router.post("/{name}")
async def run_scenario(name: str, app_state: ApplicationState = Depends(get_state)):
    """
    Run one scenario: orchestration, deployment, security, performance,
    network or storage.

    Failures surface as ScenarioExecutionError, rendered as a 500 by the
    application's DemoError handler.
    """
    scenario = get_scenario(name)
    logger.info(f"[ScenarioAPI] Running {scenario.name}")
    return await app_state.runner.run(scenario)
