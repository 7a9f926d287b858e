"""
cost/schema.py - Cost data structures.

CostBreakdown holds the nine line items of a system estimate;
SystemEstimate bundles a breakdown with its insurance detail, TRL
annotation and consistency findings.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, TYPE_CHECKING

from ..core.enums import RiskTier, SystemCategory
from ..core.utils import determinize_dict
from .insurance import InsuranceEstimate

if TYPE_CHECKING:
    from ..validators.consistency import Violation


# Display order and labels of breakdown line items
LINE_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("procurement", "Procurement"),
    ("launch", "Launch"),
    ("assembly", "Assembly & Integration"),
    ("testing", "Testing & Qualification"),
    ("operations", "Operations (Year 1)"),
    ("insurance", "Insurance (Year 1)"),
    ("regulatory", "Regulatory & Licensing"),
    ("contingency", "Contingency"),
)


@dataclass(frozen=True)
class CostBreakdown:
    """
    Line-item cost breakdown in whole USD.

    ``total`` is the exact sum of the other eight fields.
    """
    procurement: int
    launch: int
    assembly: int
    testing: int
    operations: int
    insurance: int
    regulatory: int
    contingency: int
    total: int

    @property
    def subtotal(self) -> int:
        """Everything except contingency."""
        return self.total - self.contingency

    def line_items(self) -> List[Tuple[str, str, int]]:
        """(key, label, amount) in display order."""
        return [(key, label, getattr(self, key)) for key, label in LINE_ITEMS]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "procurement": self.procurement,
            "launch": self.launch,
            "assembly": self.assembly,
            "testing": self.testing,
            "operations": self.operations,
            "insurance": self.insurance,
            "regulatory": self.regulatory,
            "contingency": self.contingency,
            "total": self.total,
        }


@dataclass(frozen=True)
class SystemEstimate:
    """Complete estimate for one orbital system under one launch assumption."""
    slug: str
    name: str
    category: SystemCategory
    vehicle: str
    rate_table_version: str
    mass_kg: float
    item_count: int
    breakdown: CostBreakdown
    insurance: InsuranceEstimate
    trl: int
    trl_label: str
    risk_tier: RiskTier
    violations: Tuple["Violation", ...] = field(default_factory=tuple)

    @property
    def is_consistent(self) -> bool:
        """True when the declared BOM values match the recomputed ones."""
        return not self.violations

    @property
    def total_usd(self) -> int:
        return self.breakdown.total

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a deterministic dictionary."""
        return determinize_dict({
            "slug": self.slug,
            "name": self.name,
            "category": self.category,
            "vehicle": self.vehicle,
            "rate_table_version": self.rate_table_version,
            "mass_kg": self.mass_kg,
            "item_count": self.item_count,
            "breakdown": self.breakdown.to_dict(),
            "insurance": self.insurance.to_dict(),
            "trl": self.trl,
            "trl_label": self.trl_label,
            "risk_tier": self.risk_tier,
            "is_consistent": self.is_consistent,
            "violations": [v.to_dict() for v in self.violations],
        })
