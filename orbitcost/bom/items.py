"""
bom/items.py - Bill-of-materials data structures.

Core records for hierarchical BOM estimation:
- BOMItem: a line item with quantity and unit values
- Subsystem: a named group of items with declared totals
- OrbitalSystem: a complete system with per-system cost parameters

Records are immutable. Declared totals are kept as entered; the
aggregator recomputes and the validator compares.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..core.enums import BOMCategory, SystemCategory


@dataclass(frozen=True)
class BOMItem:
    """
    Individual BOM line item.

    Attributes:
        name: Descriptive name for the item
        category: BOM category tag
        quantity: Number of units (non-negative integer)
        unit_mass_kg: Mass per unit in kilograms
        unit_cost_usd: Cost per unit in USD
        total_mass_kg: Optional hand-entered line mass, checked by the validator
        total_cost_usd: Optional hand-entered line cost, checked by the validator
        supplier: Optional supplier or heritage reference
        notes: Optional notes
    """
    name: str
    category: BOMCategory
    quantity: int
    unit_mass_kg: float
    unit_cost_usd: float
    total_mass_kg: Optional[float] = None
    total_cost_usd: Optional[float] = None
    supplier: Optional[str] = None
    notes: Optional[str] = None

    @property
    def mass_kg(self) -> float:
        """Line mass (quantity x unit mass)."""
        return self.quantity * self.unit_mass_kg

    @property
    def cost_usd(self) -> float:
        """Line cost (quantity x unit cost)."""
        return self.quantity * self.unit_cost_usd

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "category": self.category.value,
            "quantity": self.quantity,
            "unit_mass_kg": self.unit_mass_kg,
            "unit_cost_usd": self.unit_cost_usd,
            "mass_kg": self.mass_kg,
            "cost_usd": self.cost_usd,
            "total_mass_kg": self.total_mass_kg,
            "total_cost_usd": self.total_cost_usd,
            "supplier": self.supplier,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class Subsystem:
    """Named group of BOM items with declared mass and cost."""
    name: str
    mass_kg: float
    cost_usd: float
    items: Tuple[BOMItem, ...] = ()
    description: str = ""

    @property
    def item_count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "mass_kg": self.mass_kg,
            "cost_usd": self.cost_usd,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass(frozen=True)
class OrbitalSystem:
    """
    Complete orbital system description.

    Carries physical parameters, the subsystem tree and the per-system
    cost parameters used by the estimator. ``total_mass_kg`` and
    ``procurement_usd`` are declared values; the estimator always
    works from recomputed BOM totals.
    """
    slug: str
    name: str
    category: SystemCategory
    total_mass_kg: float
    tech_readiness_level: int
    subsystems: Tuple[Subsystem, ...] = ()

    variant: Optional[str] = None
    description: str = ""
    orbit: str = ""
    altitude_km: float = 0.0
    crew_capacity: int = 0
    power_kw: float = 0.0
    design_life_years: float = 1.0
    timeline_years: float = 1.0

    # Cost parameters
    annual_operating_cost_usd: float = 0.0
    assembly_factor: float = 0.0
    testing_factor: float = 0.0
    contingency_rate: Optional[float] = None
    procurement_usd: Optional[float] = None
    insurance_notes: Optional[str] = None

    revenue_model_notes: str = ""
    reference_programs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Name with variant, e.g. 'Orbital Habitat (Small (4 Crew))'."""
        if self.variant:
            return f"{self.name} ({self.variant})"
        return self.name

    @property
    def item_count(self) -> int:
        return sum(s.item_count for s in self.subsystems)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "slug": self.slug,
            "name": self.name,
            "variant": self.variant,
            "category": self.category.value,
            "description": self.description,
            "orbit": self.orbit,
            "altitude_km": self.altitude_km,
            "total_mass_kg": self.total_mass_kg,
            "crew_capacity": self.crew_capacity,
            "power_kw": self.power_kw,
            "design_life_years": self.design_life_years,
            "timeline_years": self.timeline_years,
            "tech_readiness_level": self.tech_readiness_level,
            "annual_operating_cost_usd": self.annual_operating_cost_usd,
            "assembly_factor": self.assembly_factor,
            "testing_factor": self.testing_factor,
            "contingency_rate": self.contingency_rate,
            "procurement_usd": self.procurement_usd,
            "insurance_notes": self.insurance_notes,
            "revenue_model_notes": self.revenue_model_notes,
            "reference_programs": list(self.reference_programs),
            "subsystems": [s.to_dict() for s in self.subsystems],
        }
