"""
cost/estimator.py - Cost breakdown compiler and system estimation engine.

compose_breakdown() turns procurement, mass and per-system factors into
a CostBreakdown. CostEstimator runs the whole pipeline for a system:
aggregate the BOM, price it, compute insurance, validate and annotate.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional
import logging

from ..bom.aggregator import aggregate_system
from ..bom.items import OrbitalSystem
from ..core.utils import round_usd
from ..errors import InvalidInput, require_fraction, require_non_negative
from ..lookup.classification import trl_label, trl_risk_tier
from ..validators.consistency import ConsistencyValidator, ValidationTolerance
from .insurance import estimate_insurance
from .launch import launch_cost
from .rates import RateTable
from .schema import CostBreakdown, SystemEstimate

logger = logging.getLogger(__name__)


def compose_breakdown(
    procurement: float,
    total_mass_kg: float,
    assembly_factor: float,
    testing_factor: float,
    annual_ops: float,
    rate_table: RateTable,
    vehicle: str,
    contingency_rate: Optional[float] = None,
) -> CostBreakdown:
    """
    Compile a line-item cost breakdown.

    Steps:
    1. Launch = mass x vehicle cost/kg
    2. Assembly and testing as fractions of procurement
    3. First-year insurance on procurement + launch
    4. Subtotal adds operations and the regulatory baseline
    5. Contingency as a fraction of the subtotal

    Args:
        procurement: Hardware procurement cost (USD)
        total_mass_kg: Launch mass (kg)
        assembly_factor: Assembly & integration fraction of procurement
        testing_factor: Testing & qualification fraction of procurement
        annual_ops: First-year operating cost (USD)
        rate_table: Market assumptions
        vehicle: Launch vehicle key
        contingency_rate: Override for the table's default contingency

    Returns:
        CostBreakdown with whole-dollar amounts; total is their exact sum

    Raises:
        InvalidInput: negative amounts or factors outside [0, 1]
        UnknownVehicle: vehicle not in the rate table
    """
    require_non_negative(procurement, "procurement")
    require_non_negative(total_mass_kg, "total_mass_kg")
    require_fraction(assembly_factor, "assembly_factor")
    require_fraction(testing_factor, "testing_factor")
    require_non_negative(annual_ops, "annual_ops")
    if contingency_rate is None:
        contingency_rate = rate_table.default_contingency_rate
    require_fraction(contingency_rate, "contingency_rate")

    procurement = round_usd(procurement)
    operations = round_usd(annual_ops)
    regulatory = round_usd(rate_table.regulatory_baseline_usd)

    launch = round_usd(launch_cost(total_mass_kg, vehicle, rate_table))
    assembly = round_usd(procurement * assembly_factor)
    testing = round_usd(procurement * testing_factor)
    insurance = estimate_insurance(procurement + launch, rate_table).total_first_year_usd

    subtotal = procurement + launch + assembly + testing + operations + insurance + regulatory
    contingency = round_usd(subtotal * contingency_rate)

    breakdown = CostBreakdown(
        procurement=procurement,
        launch=launch,
        assembly=assembly,
        testing=testing,
        operations=operations,
        insurance=insurance,
        regulatory=regulatory,
        contingency=contingency,
        total=subtotal + contingency,
    )
    logger.debug(f"Breakdown on {vehicle}: subtotal ${subtotal:,}, contingency ${contingency:,}")
    return breakdown


class CostEstimator:
    """
    System estimation engine.

    Holds the rate table, an optional default vehicle and the validator
    tolerance. Estimates are independent of each other; the estimator
    keeps no per-call state.
    """

    def __init__(
        self,
        rate_table: RateTable,
        vehicle: Optional[str] = None,
        tolerance: Optional[ValidationTolerance] = None,
    ):
        self.rate_table = rate_table
        self.vehicle = vehicle
        self.validator = ConsistencyValidator(tolerance)

    def resolve_vehicle(self, vehicle: Optional[str] = None) -> str:
        """Explicit vehicle, else the estimator default, else the table default."""
        resolved = vehicle or self.vehicle or self.rate_table.default_vehicle
        if not resolved:
            raise InvalidInput("No launch vehicle given and the rate table has no default")
        return resolved

    def estimate(self, system: OrbitalSystem, vehicle: Optional[str] = None) -> SystemEstimate:
        """
        Estimate one system.

        Procurement and launch mass come from the recomputed BOM, not the
        declared values; declared/recomputed drift is reported in
        ``violations``.
        """
        vehicle = self.resolve_vehicle(vehicle)
        totals = aggregate_system(system)

        breakdown = compose_breakdown(
            procurement=totals.cost_usd,
            total_mass_kg=totals.mass_kg,
            assembly_factor=system.assembly_factor,
            testing_factor=system.testing_factor,
            annual_ops=system.annual_operating_cost_usd,
            rate_table=self.rate_table,
            vehicle=vehicle,
            contingency_rate=system.contingency_rate,
        )
        insurance = estimate_insurance(
            breakdown.procurement + breakdown.launch,
            self.rate_table,
            notes=system.insurance_notes,
        )
        violations = self.validator.validate(system)

        estimate = SystemEstimate(
            slug=system.slug,
            name=system.display_name,
            category=system.category,
            vehicle=vehicle,
            rate_table_version=self.rate_table.version,
            mass_kg=totals.mass_kg,
            item_count=totals.item_count,
            breakdown=breakdown,
            insurance=insurance,
            trl=system.tech_readiness_level,
            trl_label=trl_label(system.tech_readiness_level),
            risk_tier=trl_risk_tier(system.tech_readiness_level),
            violations=tuple(violations),
        )
        logger.info(
            f"Estimated '{system.slug}' on {vehicle}: ${breakdown.total:,} total, "
            f"{totals.mass_kg:,.0f} kg, {len(violations)} violation(s)"
        )
        return estimate

    def estimate_many(
        self,
        systems: Iterable[OrbitalSystem],
        vehicle: Optional[str] = None,
    ) -> List[SystemEstimate]:
        """Estimate several systems, preserving input order."""
        return [self.estimate(system, vehicle) for system in systems]

    def price_across_vehicles(
        self,
        system: OrbitalSystem,
        vehicles: Optional[Iterable[str]] = None,
    ) -> Dict[str, CostBreakdown]:
        """
        Breakdown of one system under each launch assumption.

        Args:
            system: System to price
            vehicles: Vehicle keys (default: every vehicle in the table)

        Raises:
            UnknownVehicle: a requested vehicle is not in the table
        """
        totals = aggregate_system(system)
        vehicles = list(vehicles) if vehicles is not None else self.rate_table.vehicles

        results: Dict[str, CostBreakdown] = {}
        for vehicle in vehicles:
            results[vehicle] = compose_breakdown(
                procurement=totals.cost_usd,
                total_mass_kg=totals.mass_kg,
                assembly_factor=system.assembly_factor,
                testing_factor=system.testing_factor,
                annual_ops=system.annual_operating_cost_usd,
                rate_table=self.rate_table,
                vehicle=vehicle,
                contingency_rate=system.contingency_rate,
            )
        logger.info(f"Priced '{system.slug}' across {len(results)} vehicle(s)")
        return results
