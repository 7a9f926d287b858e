"""
lookup/classification.py - TRL and category lookups.

Fixed label tables for technology readiness levels and system
categories, plus category counts over a collection of systems.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..core.enums import RiskTier, SystemCategory
from ..errors import InvalidInput

TRL_LABELS: Dict[int, str] = {
    1: "Basic principles",
    2: "Concept formulated",
    3: "Proof of concept",
    4: "Lab validated",
    5: "Relevant environment",
    6: "Demo in relevant env",
    7: "System prototype",
    8: "Qualified system",
    9: "Flight proven",
}

CATEGORY_LABELS: Dict[SystemCategory, str] = {
    SystemCategory.HABITAT: "Orbital Habitats",
    SystemCategory.MANUFACTURING: "Manufacturing",
    SystemCategory.INFRASTRUCTURE: "Infrastructure",
    SystemCategory.POWER: "Power Systems",
    SystemCategory.SERVICES: "Orbital Services",
    SystemCategory.SCIENCE: "Science & Research",
}


def _check_trl(trl: Any) -> int:
    if isinstance(trl, bool) or not isinstance(trl, int) or trl not in TRL_LABELS:
        raise InvalidInput(f"Technology readiness level must be an integer 1-9, got {trl!r}", value=trl)
    return trl


def trl_label(trl: int) -> str:
    """Short label for a TRL, e.g. 7 -> 'System prototype'."""
    return TRL_LABELS[_check_trl(trl)]


def trl_risk_tier(trl: int) -> RiskTier:
    """
    Risk tier for a TRL.

    green >= 7, yellow >= 5, orange >= 3, red otherwise.
    """
    trl = _check_trl(trl)
    if trl >= 7:
        return RiskTier.GREEN
    if trl >= 5:
        return RiskTier.YELLOW
    if trl >= 3:
        return RiskTier.ORANGE
    return RiskTier.RED


def parse_category(value: Any) -> SystemCategory:
    """Coerce a string or enum into a SystemCategory."""
    try:
        return SystemCategory(value)
    except ValueError:
        raise InvalidInput(
            f"Unknown system category {value!r}; expected one of "
            f"{', '.join(c.value for c in SystemCategory)}",
            value=value,
        ) from None


def category_label(category: Any) -> str:
    return CATEGORY_LABELS[parse_category(category)]


def categorize(systems: Iterable[Any]) -> Dict[SystemCategory, int]:
    """
    Count systems per category.

    Every category is present in the result, including those with
    zero systems.

    Raises:
        InvalidInput: a system has an unknown category
    """
    counts = {category: 0 for category in SystemCategory}
    for system in systems:
        counts[parse_category(system.category)] += 1
    return counts


@dataclass(frozen=True)
class CategorySummary:
    """Display row for a category listing."""
    value: SystemCategory
    label: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value.value, "label": self.label, "count": self.count}


def category_summaries(systems: Iterable[Any]) -> List[CategorySummary]:
    """Category rows in declaration order with display labels and counts."""
    counts = categorize(systems)
    return [
        CategorySummary(value=category, label=CATEGORY_LABELS[category], count=count)
        for category, count in counts.items()
    ]
