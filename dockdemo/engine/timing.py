"""
Simulated time and randomness for scenario scripts.

Delays only exist to pace the dashboard. They are expressed as data
(``Delay``) and waited on through an injected ``Sleeper``, so the same
script runs with real pauses in production and with no pauses at all in
tests. Randomness goes through a ``random.Random`` handed in by the caller.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

# Signature of anything that can wait a number of seconds
Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class Delay:
    """
    A simulated pause in milliseconds.

    Fixed when ``high_ms`` is None, otherwise sampled uniformly from
    ``[low_ms, high_ms)`` every time it is drawn.
    """
    low_ms: float
    high_ms: Optional[float] = None

    def __post_init__(self):
        if self.low_ms < 0:
            raise ValueError(f"Delay cannot be negative: {self.low_ms}")
        if self.high_ms is not None and self.high_ms < self.low_ms:
            raise ValueError(f"Delay range is inverted: [{self.low_ms}, {self.high_ms})")

    @classmethod
    def fixed(cls, ms: float) -> "Delay":
        return cls(ms)

    @classmethod
    def between(cls, low_ms: float, high_ms: float) -> "Delay":
        return cls(low_ms, high_ms)

    def sample_ms(self, rng: random.Random) -> float:
        if self.high_ms is None:
            return self.low_ms
        return rng.random() * (self.high_ms - self.low_ms) + self.low_ms


# Every simulated `docker ...` invocation takes 0.5-2.5 seconds
COMMAND_DELAY = Delay.between(500, 2500)

NO_DELAY = Delay.fixed(0)


async def real_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


async def instant_sleep(seconds: float) -> None:
    # Still yields to the loop so concurrent scenarios interleave like they would live
    await asyncio.sleep(0)


def scaled_sleeper(time_scale: float, sleeper: Sleeper = real_sleep) -> Sleeper:
    """Wrap ``sleeper`` so every wait is multiplied by ``time_scale``."""
    if time_scale == 0:
        return instant_sleep
    if time_scale == 1:
        return sleeper

    async def _sleep(seconds: float) -> None:
        await sleeper(seconds * time_scale)

    return _sleep


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)
