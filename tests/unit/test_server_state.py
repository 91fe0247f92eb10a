import asyncio

from dockdemo.base.config import DemoConfig, SimulationConfig
from dockdemo.engine.timing import instant_sleep
from dockdemo.server.state import ApplicationState, get_state


def test_reset_instance_replaces_shared_state():
    first = ApplicationState.reset_instance(DemoConfig(simulation=SimulationConfig(time_scale=0)))
    assert get_state() is first

    second = ApplicationState.reset_instance(DemoConfig(simulation=SimulationConfig(time_scale=0)))
    assert get_state() is second
    assert second.holder is not first.holder


def test_runner_wiring_follows_config():
    unlocked = ApplicationState(DemoConfig(simulation=SimulationConfig(time_scale=0)))
    assert unlocked.scenario_lock is None
    assert unlocked.runner.lock is None
    assert unlocked.runner.sleeper is instant_sleep
    assert unlocked.runner.holder is unlocked.holder

    locked = ApplicationState(
        DemoConfig(simulation=SimulationConfig(time_scale=0, serialize_scenarios=True))
    )
    assert isinstance(locked.scenario_lock, asyncio.Lock)
    assert locked.runner.lock is locked.scenario_lock


def test_seeded_config_gives_reproducible_rng():
    cfg = DemoConfig(simulation=SimulationConfig(time_scale=0, seed=5))
    a = ApplicationState(cfg).runner.rng.random()
    b = ApplicationState(cfg).runner.rng.random()
    assert a == b


def test_uptime_is_non_negative():
    assert ApplicationState(DemoConfig(simulation=SimulationConfig(time_scale=0))).uptime >= 0
