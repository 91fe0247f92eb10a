from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from dockdemo.base.config import DemoConfig, get_config
from dockdemo.engine.runner import StepRunner
from dockdemo.engine.timing import make_rng, scaled_sleeper
from dockdemo.state.system import StateHolder

logger = logging.getLogger(__name__)


class ApplicationState:
    """Everything the routers share: the system state holder and the step runner."""

    _instance = None

    @classmethod
    def instance(cls) -> ApplicationState:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls, config: Optional[DemoConfig] = None) -> ApplicationState:
        """Replace the shared instance (startup with a fresh config, tests)."""
        cls._instance = cls(config)
        return cls._instance

    def __init__(self, config: Optional[DemoConfig] = None):
        self.config = config or get_config()
        sim = self.config.simulation

        self.started_at = time.monotonic()
        self.holder = StateHolder()
        self.scenario_lock: Optional[asyncio.Lock] = (
            asyncio.Lock() if sim.serialize_scenarios else None
        )
        self.runner = StepRunner(
            self.holder,
            sleeper=scaled_sleeper(sim.time_scale),
            rng=make_rng(sim.seed),
            lock=self.scenario_lock,
        )

    @property
    def uptime(self) -> float:
        return time.monotonic() - self.started_at


def get_state() -> ApplicationState:
    return ApplicationState.instance()
