"""
Step runner: drives one scenario script against the shared system state.

A scenario is data: an intro line, an ordered tuple of steps, a closing
line and a summary builder. The runner owns the control flow every
scenario shares:

    intro log
    for each step: wait -> mutate current state -> log
    testsPassed += 1, closing success log
    return summary

Any exception raised by a step stops the script on the spot. Mutations
already applied stay applied, an ``Error: ...`` line goes to the scenario's
category, and the caller gets a ScenarioExecutionError carrying the
failure message unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from dockdemo.engine.timing import COMMAND_DELAY, NO_DELAY, Delay, Sleeper, real_sleep
from dockdemo.errors import ScenarioExecutionError
from dockdemo.state.logs import LogCategory, LogType
from dockdemo.state.system import StateHolder, SystemState

logger = logging.getLogger(__name__)

Mutation = Callable[[SystemState], None]
Metrics = Dict[str, Any]


def _no_metrics(rng: random.Random) -> Metrics:
    return {}


@dataclass(frozen=True)
class Step:
    """
    One delay + mutate + log unit.

    ``commands`` are simulated Docker invocations, each waited on with its
    own sample of COMMAND_DELAY. ``delay`` is an extra pause after them.
    ``message`` may use ``str.format`` fields filled from the scenario's
    sampled metrics.
    """
    message: str
    type: LogType = LogType.SUCCESS
    commands: Tuple[str, ...] = ()
    delay: Delay = NO_DELAY
    mutate: Optional[Mutation] = None


@dataclass(frozen=True)
class Scenario:
    category: LogCategory
    intro: str
    steps: Tuple[Step, ...]
    outro: str
    completed: str
    summary: Callable[[Metrics], Dict[str, Any]]
    sample: Callable[[random.Random], Metrics] = field(default=_no_metrics)

    @property
    def name(self) -> str:
        return self.category.value


@dataclass(frozen=True)
class CommandResult:
    command: str
    output: str
    duration_ms: float


class StepRunner:
    """
    Executes scenario scripts strictly step by step.

    Args:
        holder: Owner of the live SystemState; re-read before every step so
            a reset mid-run redirects the remaining steps to the new state
        sleeper: Coroutine function used for every simulated wait (seconds)
        rng: Random source for command durations and cosmetic metrics
        lock: When given, whole scenario runs are serialized behind it
    """

    def __init__(
        self,
        holder: StateHolder,
        sleeper: Sleeper = real_sleep,
        rng: Optional[random.Random] = None,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.holder = holder
        self.sleeper = sleeper
        self.rng = rng if rng is not None else random.Random()
        self.lock = lock

    async def run(self, scenario: Scenario) -> Dict[str, Any]:
        if self.lock is None:
            return await self._execute(scenario)
        async with self.lock:
            return await self._execute(scenario)

    async def simulate_command(self, command: str) -> CommandResult:
        duration_ms = COMMAND_DELAY.sample_ms(self.rng)
        await self.sleeper(duration_ms / 1000)
        return CommandResult(command=command, output=f"Simulated: {command}", duration_ms=duration_ms)

    async def _execute(self, scenario: Scenario) -> Dict[str, Any]:
        category = scenario.category
        started = time.monotonic()

        self._log(category, scenario.intro, LogType.INFO)

        index: Optional[int] = None
        try:
            metrics = scenario.sample(self.rng)
            for index, step in enumerate(scenario.steps):
                for command in step.commands:
                    outcome = await self.simulate_command(command)
                    logger.debug(f"[{category.value}] {outcome.output} ({outcome.duration_ms:.0f}ms)")
                pause_ms = step.delay.sample_ms(self.rng)
                if pause_ms:
                    await self.sleeper(pause_ms / 1000)

                state = self.holder.current
                if step.mutate is not None:
                    step.mutate(state)
                state.logs.append(category, step.message.format(**metrics), step.type)

            index = None
            self.holder.current.record_pass()
            self._log(category, scenario.outro, LogType.SUCCESS)
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            self._log(category, f"Error: {message}", LogType.ERROR)
            logger.error(f"[{category.value}] scenario aborted at step {index}: {message}", exc_info=True)
            raise ScenarioExecutionError(category.value, message, step=index) from exc

        logger.info(f"[{category.value}] scenario completed in {time.monotonic() - started:.2f}s")
        result: Dict[str, Any] = {"success": True, "message": scenario.completed}
        result.update(scenario.summary(metrics))
        return result

    def _log(self, category: LogCategory, message: str, type: LogType) -> None:
        self.holder.current.logs.append(category, message, type)
