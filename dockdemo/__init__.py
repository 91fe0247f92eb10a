# ============================================================================
# dockdemo/__init__.py
# Package Marker for the Docker Demo Server
# ============================================================================
#
# PURPOSE:
# A demo backend that pretends to run Docker workloads. Each "test" the
# dashboard triggers is a scripted sequence of timed steps that bump some
# counters and write log lines; nothing touches a real container runtime.
#
# LAYOUT:
# - base/: configuration and the log id sequence
# - state/: log store and the shared system counters
# - engine/: step runner, simulated time, the six scenario scripts
# - server/: FastAPI application and routers
#
# ============================================================================

__version__ = "1.0.0"
