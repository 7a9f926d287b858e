"""
catalog/schema.py - Catalog file schema.

pydantic models for catalog files (JSON or YAML). Records validate
value ranges and reject unknown keys, then convert to the immutable
BOM records used by the engine.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..bom.items import BOMItem, Subsystem, OrbitalSystem
from ..core.enums import BOMCategory, SystemCategory


class BOMItemRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    category: BOMCategory
    quantity: int = Field(default=1, ge=0)
    unit_mass_kg: float = Field(..., ge=0)
    unit_cost_usd: float = Field(..., ge=0)
    total_mass_kg: Optional[float] = Field(default=None, ge=0)
    total_cost_usd: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    notes: Optional[str] = None

    def to_item(self) -> BOMItem:
        return BOMItem(
            name=self.name,
            category=self.category,
            quantity=self.quantity,
            unit_mass_kg=self.unit_mass_kg,
            unit_cost_usd=self.unit_cost_usd,
            total_mass_kg=self.total_mass_kg,
            total_cost_usd=self.total_cost_usd,
            supplier=self.supplier,
            notes=self.notes,
        )


class SubsystemRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    mass_kg: float = Field(..., ge=0)
    cost_usd: float = Field(..., ge=0)
    items: List[BOMItemRecord] = Field(default_factory=list)

    def to_subsystem(self) -> Subsystem:
        return Subsystem(
            name=self.name,
            description=self.description,
            mass_kg=self.mass_kg,
            cost_usd=self.cost_usd,
            items=tuple(i.to_item() for i in self.items),
        )


class OrbitalSystemRecord(BaseModel):
    """One orbital system in a catalog file."""
    model_config = ConfigDict(extra="forbid")

    slug: str = Field(..., min_length=1)
    name: str
    variant: Optional[str] = None
    category: SystemCategory
    description: str = ""
    orbit: str = ""
    altitude_km: float = Field(default=0.0, ge=0)
    total_mass_kg: float = Field(..., ge=0)
    crew_capacity: int = Field(default=0, ge=0)
    power_kw: float = Field(default=0.0, ge=0)
    design_life_years: float = Field(default=1.0, gt=0)
    timeline_years: float = Field(default=1.0, gt=0)
    tech_readiness_level: int = Field(..., ge=1, le=9)
    subsystems: List[SubsystemRecord] = Field(default_factory=list)

    annual_operating_cost_usd: float = Field(default=0.0, ge=0)
    assembly_factor: float = Field(default=0.0, ge=0, le=1)
    testing_factor: float = Field(default=0.0, ge=0, le=1)
    contingency_rate: Optional[float] = Field(default=None, ge=0, le=1)
    procurement_usd: Optional[float] = Field(default=None, ge=0)
    insurance_notes: Optional[str] = None

    revenue_model_notes: str = ""
    reference_programs: List[str] = Field(default_factory=list)

    def to_system(self) -> OrbitalSystem:
        return OrbitalSystem(
            slug=self.slug,
            name=self.name,
            variant=self.variant,
            category=self.category,
            description=self.description,
            orbit=self.orbit,
            altitude_km=self.altitude_km,
            total_mass_kg=self.total_mass_kg,
            crew_capacity=self.crew_capacity,
            power_kw=self.power_kw,
            design_life_years=self.design_life_years,
            timeline_years=self.timeline_years,
            tech_readiness_level=self.tech_readiness_level,
            subsystems=tuple(s.to_subsystem() for s in self.subsystems),
            annual_operating_cost_usd=self.annual_operating_cost_usd,
            assembly_factor=self.assembly_factor,
            testing_factor=self.testing_factor,
            contingency_rate=self.contingency_rate,
            procurement_usd=self.procurement_usd,
            insurance_notes=self.insurance_notes,
            revenue_model_notes=self.revenue_model_notes,
            reference_programs=tuple(self.reference_programs),
        )


class CatalogFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str = "1"
    systems: List[OrbitalSystemRecord]
