"""
bootstrap/config.py - Application configuration.

Provides configuration loading from files (JSON or YAML), environment
variables, and defaults. File values override environment values.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import logging

from ..cost.rates import read_structured_file
from ..errors import ConfigurationError

logger = logging.getLogger("bootstrap.config")

ENV_PREFIX = "ORBITCOST_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}", value=raw) from None


def _env_bool(name: str, default: bool = False) -> bool:
    return (_env(name, "true" if default else "false") or "").lower() == "true"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=_env("LOG_LEVEL", "INFO"),
            format=_env("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=_env("LOG_FILE"),
            json_logs=_env_bool("JSON_LOGS"),
        )


@dataclass
class ToleranceConfig:
    """Consistency validator tolerance."""

    relative: float = 0.005
    absolute: float = 1.0

    @classmethod
    def from_env(cls) -> "ToleranceConfig":
        return cls(
            relative=_env_float("TOLERANCE_RELATIVE", 0.005),
            absolute=_env_float("TOLERANCE_ABSOLUTE", 1.0),
        )


@dataclass
class OrbitCostConfig:
    """Root configuration for the orbitcost application."""

    environment: str = "development"
    debug: bool = False

    # None selects the files shipped with the package
    rates_file: Optional[str] = None
    catalog_file: Optional[str] = None
    vehicle: Optional[str] = None

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)

    @classmethod
    def from_env(cls) -> "OrbitCostConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=_env("ENVIRONMENT", "development"),
            debug=_env_bool("DEBUG"),
            rates_file=_env("RATES_FILE"),
            catalog_file=_env("CATALOG_FILE"),
            vehicle=_env("VEHICLE"),
            logging=LoggingConfig.from_env(),
            tolerance=ToleranceConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "OrbitCostConfig":
        """Load configuration from a JSON or YAML file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        config = cls._from_dict(read_structured_file(path))

        # Relative data paths resolve against the config file's directory
        for attr in ("rates_file", "catalog_file"):
            value = getattr(config, attr)
            if value and not Path(value).is_absolute():
                setattr(config, attr, str(path.parent / value))
        return config

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "OrbitCostConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        for key in ("environment", "debug", "rates_file", "catalog_file", "vehicle"):
            if key in data:
                setattr(config, key, data[key])

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        if "tolerance" in data:
            for key, value in data["tolerance"].items():
                if hasattr(config.tolerance, key):
                    setattr(config.tolerance, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "rates_file": self.rates_file,
            "catalog_file": self.catalog_file,
            "vehicle": self.vehicle,
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "tolerance": {
                "relative": self.tolerance.relative,
                "absolute": self.tolerance.absolute,
            },
        }


# Global config instance
_config: Optional[OrbitCostConfig] = None


def load_config(filepath: Optional[str] = None) -> OrbitCostConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to a JSON or YAML config file

    Returns:
        OrbitCostConfig instance
    """
    global _config

    if filepath:
        _config = OrbitCostConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./orbitcost.json",
            "./config/orbitcost.json",
            os.path.expanduser("~/.orbitcost/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = OrbitCostConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = OrbitCostConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> OrbitCostConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None
