"""Module system: the counters the dashboard displays and their owner."""
#
# PURPOSE:
# SystemState is the whole in-memory world of the demo: how many
# containers, images and networks the fake Docker host has, how many
# tests passed, and the log store. StateHolder owns the one live instance
# and swaps it out on reset.
#
# KEY CONCEPTS:
# - Reset is a reference swap, never an in-place clear. Anything holding
#   the old object keeps a consistent (old) view.
# - No locking around counters: concurrent scenarios may interleave
#   their updates at await points.
#

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dockdemo.state.logs import LogStore

logger = logging.getLogger(__name__)

# Counters installed by a reset: a few base services, their images,
# and the default bridge network
BASELINE_CONTAINERS = 3
BASELINE_IMAGES = 2
BASELINE_NETWORKS = 1


@dataclass
class SystemState:
    containers: int = 0
    images: int = 0
    networks: int = 0
    tests_passed: int = 0
    logs: LogStore = field(default_factory=LogStore)

    @classmethod
    def baseline(cls) -> "SystemState":
        return cls(
            containers=BASELINE_CONTAINERS,
            images=BASELINE_IMAGES,
            networks=BASELINE_NETWORKS,
            tests_passed=0,
        )

    def add(self, containers: int = 0, images: int = 0, networks: int = 0) -> None:
        """Apply counter deltas. Counters never go below zero."""
        new_containers = self.containers + containers
        new_images = self.images + images
        new_networks = self.networks + networks
        if min(new_containers, new_images, new_networks) < 0:
            raise ValueError(
                f"Counters cannot go negative "
                f"(containers={new_containers}, images={new_images}, networks={new_networks})"
            )
        self.containers = new_containers
        self.images = new_images
        self.networks = new_networks

    def record_pass(self) -> None:
        self.tests_passed += 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the dashboard reads."""
        return {
            "containers": self.containers,
            "images": self.images,
            "networks": self.networks,
            "testsPassed": self.tests_passed,
            "logs": self.logs.to_dict(),
        }


class StateHolder:
    """
    Owner of the single live SystemState.

    Handed to the step runner and the routers explicitly; nothing reaches
    the state through a module global.
    """

    def __init__(self, state: Optional[SystemState] = None):
        self._state = state if state is not None else SystemState()

    @property
    def current(self) -> SystemState:
        return self._state

    def snapshot(self) -> Dict[str, Any]:
        return self._state.to_dict()

    def reset(self) -> SystemState:
        """
        Install a fresh baseline state.

        The new object is fully built before the single assignment that
        publishes it.
        """
        fresh = SystemState.baseline()
        previous = self._state
        self._state = fresh
        logger.info(
            f"System reset (was containers={previous.containers}, images={previous.images}, "
            f"networks={previous.networks}, testsPassed={previous.tests_passed})"
        )
        return fresh
