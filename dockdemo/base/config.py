# ============================================================================
# dockdemo/base/config.py
# Application Configuration Management
# ============================================================================
#
# PURPOSE:
# All knobs of the demo server live here: where it listens, how it logs,
# how fast the simulated Docker commands run, and whether scenario runs are
# serialized. Everything is read from environment variables once, at first
# use, and shared through a module-level singleton.
#
# KEY CONCEPTS:
# 1. Frozen dataclasses: each section is immutable after creation
# 2. Environment Variables: DOCKDEMO_* settings, with PORT and NODE_ENV
#    honoured for hosting platforms that only set those
# 3. Singleton: get_config() builds once, set_config() swaps it in tests
#
# ============================================================================

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dockdemo.errors import config_error

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise config_error(f"{name} must be an integer, got {raw!r}", variable=name) from None


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise config_error(f"{name} must be a number, got {raw!r}", variable=name) from None


# ============================================================================
# Simulation Configuration
# ============================================================================
# Controls the pacing and randomness of the simulated scenarios.

@dataclass(frozen=True)
class SimulationConfig:
    # Multiplier applied to every simulated delay
    # 1.0 = real UX pacing (a full orchestration run takes ~12 seconds)
    # 0.0 = no waiting at all (tests, load checks)
    time_scale: float = 1.0

    # Seed for the random source behind cosmetic metrics and command durations
    # None = fresh entropy every process start
    seed: Optional[int] = None

    # Run one scenario at a time behind a single lock?
    # False = scenarios interleave freely on the shared state
    # True = each scenario has the state to itself until it finishes
    serialize_scenarios: bool = False

    def __post_init__(self):
        if self.time_scale < 0:
            raise config_error("time_scale must be >= 0", time_scale=self.time_scale)


# ============================================================================
# Logging Configuration
# ============================================================================

@dataclass(frozen=True)
class LogConfig:
    # DEBUG / INFO / WARNING / ERROR
    level: str = "INFO"

    # %(asctime)s = timestamp, %(name)s = module that logged, %(message)s = text
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # Optional log file; console-only when unset
    file_path: Optional[Path] = None

    # Rotate the file at this size, keep this many old copies
    max_file_size_mb: int = 10
    backup_count: int = 5


# ============================================================================
# Master Configuration Container
# ============================================================================

@dataclass(frozen=True)
class DemoConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    log: LogConfig = field(default_factory=LogConfig)

    # Reported back in /api/status so the dashboard can show where it runs
    environment: str = "development"

    # 0.0.0.0 because the demo is meant to be reachable from a browser
    # on a hosting platform, not only from localhost
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Directory holding the browser dashboard; mounted only if it exists
    static_dir: Path = field(default_factory=lambda: Path("public"))

    @classmethod
    def from_env(cls) -> "DemoConfig":
        simulation = SimulationConfig(
            time_scale=_env_float("DOCKDEMO_TIME_SCALE", "1.0"),
            seed=_env_int("DOCKDEMO_SEED", "0") if os.getenv("DOCKDEMO_SEED") else None,
            serialize_scenarios=_env_bool("DOCKDEMO_SERIALIZE_SCENARIOS"),
        )

        log_file = os.getenv("DOCKDEMO_LOG_FILE")
        log = LogConfig(
            level=os.getenv("DOCKDEMO_LOG_LEVEL", "INFO"),
            file_path=Path(log_file) if log_file else None,
        )

        # Hosting platforms hand out the port through PORT
        port_default = os.getenv("PORT", "3000")

        return cls(
            simulation=simulation,
            log=log,
            environment=os.getenv("DOCKDEMO_ENV", os.getenv("NODE_ENV", "development")),
            api_host=os.getenv("DOCKDEMO_API_HOST", "0.0.0.0"),
            api_port=_env_int("DOCKDEMO_API_PORT", port_default),
            static_dir=Path(os.getenv("DOCKDEMO_STATIC_DIR", "public")),
        )


# ============================================================================
# Global Configuration Singleton
# ============================================================================

_config: Optional[DemoConfig] = None


def get_config() -> DemoConfig:
    """
    Get the global configuration instance.

    Builds it from the environment on first call and reuses it afterwards.
    """
    global _config
    if _config is None:
        _config = DemoConfig.from_env()
    return _config


def set_config(config: Optional[DemoConfig]) -> None:
    """
    Replace the global configuration (mainly used for testing).

    Passing None drops the cached instance so the next get_config()
    re-reads the environment.
    """
    global _config
    _config = config


def setup_logging(config: Optional[DemoConfig] = None) -> None:
    """
    Configure Python's logging system based on our settings.

    Sets up console logging, plus a rotating file when a log file is configured.
    Call this once at application startup.
    """
    cfg = config or get_config()

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if cfg.log.file_path is not None:
        from logging.handlers import RotatingFileHandler
        cfg.log.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            cfg.log.file_path,
            maxBytes=cfg.log.max_file_size_mb * 1024 * 1024,  # MB to bytes
            backupCount=cfg.log.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, cfg.log.level.upper(), logging.INFO),
        format=cfg.log.format,
        handlers=handlers,
        force=True,  # Replace any existing logging configuration
    )
