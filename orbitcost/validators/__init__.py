"""
validators/ - BOM consistency checks.
"""

from .consistency import (
    ValidationTolerance,
    Violation,
    ConsistencyValidator,
    validate,
)

__all__ = [
    "ValidationTolerance",
    "Violation",
    "ConsistencyValidator",
    "validate",
]
