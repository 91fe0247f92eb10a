"""
Scenario engine: simulated time, the step runner, and the scenario scripts.
"""
from dockdemo.engine.runner import Scenario, Step, StepRunner
from dockdemo.engine.scenarios import SCENARIOS, get_scenario
from dockdemo.engine.timing import Delay

__all__ = ["Delay", "Scenario", "Step", "StepRunner", "SCENARIOS", "get_scenario"]
