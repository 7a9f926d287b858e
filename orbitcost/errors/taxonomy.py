"""
errors/taxonomy.py - Estimation error taxonomy

Structured exception types raised by the rollup engine. Consistency
findings are not errors: the validator returns them as data.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ErrorCategory(Enum):
    """Categories of estimation errors."""
    VALIDATION = "validation"        # Bad input detected before computation
    LOOKUP = "lookup"                # Missing key in a configuration table
    CONFIGURATION = "configuration"  # Unreadable or malformed config/catalog file


class OrbitCostError(Exception):
    """
    Base class for estimation errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Detailed context for debugging
    """

    code: str = "ORB_000"
    category: ErrorCategory = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Estimation error"
        self.path = path
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for reports and CLI output."""
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.path:
            parts.append(f"(at {self.path})")
        return " ".join(parts)


class InvalidInput(OrbitCostError):
    """Input value is negative, out of range, or of an unknown category."""

    code = "ORB_001"
    category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        value: Any = None,
        path: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, path=path, value=value, **kwargs)
        self.value = value


class UnknownVehicle(OrbitCostError):
    """Launch vehicle is not present in the rate table."""

    code = "ORB_002"
    category = ErrorCategory.LOOKUP

    def __init__(self, vehicle: str, available: Iterable[str] = (), **kwargs):
        self.vehicle = vehicle
        self.available: List[str] = sorted(available)
        message = f"Unknown launch vehicle '{vehicle}'"
        if self.available:
            message += f"; rate table has: {', '.join(self.available)}"
        else:
            message += "; rate table defines no vehicles"
        super().__init__(message, vehicle=vehicle, available=self.available, **kwargs)


class ConfigurationError(InvalidInput):
    """Configuration, rate table or catalog file could not be loaded."""

    code = "ORB_003"
    category = ErrorCategory.CONFIGURATION


def require_non_negative(value: float, name: str, path: Optional[str] = None) -> None:
    """Raise InvalidInput unless value is a finite number >= 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}", value=value, path=path)
    if value != value or value in (float("inf"), float("-inf")):
        raise InvalidInput(f"{name} must be finite, got {value}", value=value, path=path)
    if value < 0:
        raise InvalidInput(f"{name} cannot be negative: {value}", value=value, path=path)


def require_fraction(value: float, name: str, path: Optional[str] = None) -> None:
    """Raise InvalidInput unless 0 <= value <= 1."""
    require_non_negative(value, name, path)
    if value > 1:
        raise InvalidInput(f"{name} must be within [0, 1], got {value}", value=value, path=path)
