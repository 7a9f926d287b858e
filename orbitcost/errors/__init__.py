"""
errors/ - Error Taxonomy

Structured exceptions for invalid input and rate-table lookup misses.
"""

from .taxonomy import (
    ErrorCategory,
    OrbitCostError,
    InvalidInput,
    UnknownVehicle,
    ConfigurationError,
    require_non_negative,
    require_fraction,
)

__all__ = [
    "ErrorCategory",
    "OrbitCostError",
    "InvalidInput",
    "UnknownVehicle",
    "ConfigurationError",
    "require_non_negative",
    "require_fraction",
]
