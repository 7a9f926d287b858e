"""
cost/insurance.py - Insurance premium model.

Premiums are benchmark fractions of the insured value. Each premium is
rounded on its own; the first-year total is the sum of the rounded
premiums.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from ..core.utils import round_usd
from ..errors import require_non_negative
from .rates import RateTable

logger = logging.getLogger(__name__)

DEFAULT_INSURANCE_NOTES = (
    "Based on industry benchmark rates. Actual premiums depend on underwriter "
    "assessment, mission specifics, and operator track record."
)


@dataclass(frozen=True)
class InsuranceEstimate:
    """First-year insurance premiums for an insured value."""
    insured_value: int
    launch_premium_rate: float
    launch_premium_usd: int
    in_orbit_premium_rate: float
    in_orbit_annual_usd: int
    liability_rate: float
    liability_annual_usd: int
    total_first_year_usd: int
    notes: str = DEFAULT_INSURANCE_NOTES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "insured_value": self.insured_value,
            "launch_premium_rate": self.launch_premium_rate,
            "launch_premium_usd": self.launch_premium_usd,
            "in_orbit_premium_rate": self.in_orbit_premium_rate,
            "in_orbit_annual_usd": self.in_orbit_annual_usd,
            "liability_rate": self.liability_rate,
            "liability_annual_usd": self.liability_annual_usd,
            "total_first_year_usd": self.total_first_year_usd,
            "notes": self.notes,
        }


def estimate_insurance(
    insured_value: float,
    rate_table: RateTable,
    notes: Optional[str] = None,
) -> InsuranceEstimate:
    """
    Estimate first-year insurance for an insured value.

    Args:
        insured_value: Value at risk, normally procurement plus launch
        rate_table: Rate table supplying the insurance rates
        notes: Optional underwriting notes (defaults to the benchmark disclaimer)

    Raises:
        InvalidInput: negative insured value
    """
    require_non_negative(insured_value, "insured_value")
    rates = rate_table.insurance

    launch_premium = round_usd(insured_value * rates.launch_rate)
    in_orbit_premium = round_usd(insured_value * rates.in_orbit_annual_rate)
    liability_premium = round_usd(insured_value * rates.liability_rate)
    total = launch_premium + in_orbit_premium + liability_premium

    logger.debug(
        f"Insurance on ${insured_value:,.0f}: launch ${launch_premium:,}, "
        f"in-orbit ${in_orbit_premium:,}, liability ${liability_premium:,}"
    )

    return InsuranceEstimate(
        insured_value=round_usd(insured_value),
        launch_premium_rate=rates.launch_rate,
        launch_premium_usd=launch_premium,
        in_orbit_premium_rate=rates.in_orbit_annual_rate,
        in_orbit_annual_usd=in_orbit_premium,
        liability_rate=rates.liability_rate,
        liability_annual_usd=liability_premium,
        total_first_year_usd=total,
        notes=notes or DEFAULT_INSURANCE_NOTES,
    )
