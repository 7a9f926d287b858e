"""
cost/launch.py - Launch cost model.
"""

from __future__ import annotations
import logging

from ..errors import require_non_negative
from .rates import RateTable

logger = logging.getLogger(__name__)


def launch_cost(total_mass_kg: float, vehicle: str, rate_table: RateTable) -> float:
    """
    Launch cost for a payload mass on a vehicle.

    Result is left unrounded so that it stays linear in mass; the
    breakdown compiler rounds it to whole dollars.

    Args:
        total_mass_kg: Payload mass in kilograms
        vehicle: Vehicle key in the rate table
        rate_table: Rate table to price against

    Raises:
        InvalidInput: negative mass
        UnknownVehicle: vehicle not in the rate table
    """
    require_non_negative(total_mass_kg, "total_mass_kg")
    cost_per_kg = rate_table.cost_per_kg(vehicle)
    cost = total_mass_kg * cost_per_kg
    logger.debug(f"Launch: {total_mass_kg:.1f} kg on {vehicle} at ${cost_per_kg:,.0f}/kg = ${cost:,.0f}")
    return cost
