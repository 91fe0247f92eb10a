"""Pytest configuration for dockdemo."""
import os

import pytest

from dockdemo.base.config import DemoConfig, SimulationConfig, set_config


def pytest_configure():
    # Scenarios must not really wait during tests.
    os.environ.setdefault("DOCKDEMO_TIME_SCALE", "0")


@pytest.fixture
def config(tmp_path):
    """Instant, seeded configuration with no static directory."""
    cfg = DemoConfig(
        simulation=SimulationConfig(time_scale=0, seed=1234),
        static_dir=tmp_path / "no-such-dir",
    )
    set_config(cfg)
    yield cfg
    set_config(None)
