"""
validators/consistency.py - BOM consistency validator.

Recomputes a system bottom-up and compares every declared value
(item totals, subsystem mass/cost, system total mass and declared
procurement) against the recomputed value. Every level is compared
against recomputed truth, so drift in one place is reported once.

Mismatches are returned as Violation records and logged at WARNING;
they never raise. Invalid data is not drift: negative masses, costs or
unit values and negative or fractional quantities raise InvalidInput
from the aggregator, with the path of the offending part.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
import logging

from ..bom.aggregator import aggregate_subsystem, aggregate_system
from ..bom.items import OrbitalSystem
from ..core.utils import relative_delta
from ..errors import require_non_negative

logger = logging.getLogger(__name__)

MASS_FIELD = "mass_kg"
COST_FIELD = "cost_usd"


@dataclass(frozen=True)
class ValidationTolerance:
    """
    Allowed drift between declared and recomputed values.

    A value is within tolerance when
    ``|actual - expected| <= max(absolute, relative * |expected|)``.
    """
    relative: float = 0.005
    absolute: float = 1.0

    def __post_init__(self):
        require_non_negative(self.relative, "relative tolerance")
        require_non_negative(self.absolute, "absolute tolerance")

    def allows(self, actual: float, expected: float) -> bool:
        limit = max(self.absolute, self.relative * abs(expected))
        return abs(actual - expected) <= limit


@dataclass(frozen=True)
class Violation:
    """A declared value that disagrees with its recomputed value."""
    path: str
    label: str
    field: str
    expected: float
    actual: float

    @property
    def delta(self) -> float:
        """Declared minus recomputed."""
        return self.actual - self.expected

    @property
    def delta_kg(self) -> Optional[float]:
        return self.delta if self.field == MASS_FIELD else None

    @property
    def delta_usd(self) -> Optional[float]:
        return self.delta if self.field == COST_FIELD else None

    @property
    def message(self) -> str:
        unit = "kg" if self.field == MASS_FIELD else "USD"
        return (
            f"{self.label}: declared {self.field} {self.actual:,.2f} {unit} "
            f"differs from recomputed {self.expected:,.2f} {unit} "
            f"(delta {self.delta:+,.2f}, {relative_delta(self.actual, self.expected):+.2%})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "label": self.label,
            "field": self.field,
            "expected": self.expected,
            "actual": self.actual,
            "delta_kg": self.delta_kg,
            "delta_usd": self.delta_usd,
            "message": self.message,
        }


class ConsistencyValidator:
    """Checks declared BOM values against bottom-up recomputation."""

    def __init__(self, tolerance: Optional[ValidationTolerance] = None):
        self.tolerance = tolerance or ValidationTolerance()

    def validate(self, system: OrbitalSystem) -> List[Violation]:
        """
        Validate one system.

        Returns:
            Violations in tree order (items, then their subsystem, then the
            system), empty when everything is within tolerance

        Raises:
            InvalidInput: negative or non-integral BOM data; this is bad
                input, not a consistency finding
        """
        violations: List[Violation] = []

        for i, sub in enumerate(system.subsystems):
            sub_path = f"{system.slug}.subsystems[{i}]"

            for j, item in enumerate(sub.items):
                item_path = f"{sub_path}.items[{j}]"
                if item.total_mass_kg is not None:
                    self._compare(violations, item_path, item.name, MASS_FIELD,
                                  item.mass_kg, item.total_mass_kg)
                if item.total_cost_usd is not None:
                    self._compare(violations, item_path, item.name, COST_FIELD,
                                  item.cost_usd, item.total_cost_usd)

            # A subsystem without items only has its declared values
            if sub.items:
                totals = aggregate_subsystem(sub, path=sub_path)
                self._compare(violations, sub_path, sub.name, MASS_FIELD,
                              totals.mass_kg, sub.mass_kg)
                self._compare(violations, sub_path, sub.name, COST_FIELD,
                              totals.cost_usd, sub.cost_usd)

        system_totals = aggregate_system(system)
        self._compare(violations, system.slug, system.name, MASS_FIELD,
                      system_totals.mass_kg, system.total_mass_kg)
        if system.procurement_usd is not None:
            self._compare(violations, system.slug, system.name, COST_FIELD,
                          system_totals.cost_usd, system.procurement_usd)

        if violations:
            logger.warning(f"System '{system.slug}' has {len(violations)} consistency violation(s)")
        else:
            logger.debug(f"System '{system.slug}' is consistent")
        return violations

    def validate_catalog(self, systems: Iterable[OrbitalSystem]) -> Dict[str, List[Violation]]:
        """Validate several systems; maps slug to its violations."""
        return {system.slug: self.validate(system) for system in systems}

    def _compare(
        self,
        violations: List[Violation],
        path: str,
        label: str,
        field_name: str,
        expected: float,
        actual: float,
    ) -> None:
        if self.tolerance.allows(actual, expected):
            return
        violation = Violation(path=path, label=label, field=field_name,
                              expected=expected, actual=actual)
        logger.warning(f"{path}: {violation.message}")
        violations.append(violation)


def validate(system: OrbitalSystem, tolerance: Optional[ValidationTolerance] = None) -> List[Violation]:
    """Validate one system with an optional tolerance override."""
    return ConsistencyValidator(tolerance).validate(system)
