"""
bootstrap/ - Configuration, application wiring and entry points.
"""

from .config import (
    LoggingConfig,
    ToleranceConfig,
    OrbitCostConfig,
    load_config,
    get_config,
    reset_config,
)
from .app import AppState, OrbitCostApp
from .entrypoints import setup_logging, cli_main

__all__ = [
    "LoggingConfig",
    "ToleranceConfig",
    "OrbitCostConfig",
    "load_config",
    "get_config",
    "reset_config",
    "AppState",
    "OrbitCostApp",
    "setup_logging",
    "cli_main",
]
