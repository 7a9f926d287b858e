"""
cost/ - Cost Estimation

Launch, insurance and line-item cost models plus the system estimator.
"""

from .rates import (
    InsuranceRates,
    RateTable,
    RateTableModel,
    load_rate_table,
    default_rate_table,
)
from .launch import launch_cost
from .insurance import InsuranceEstimate, estimate_insurance, DEFAULT_INSURANCE_NOTES
from .schema import CostBreakdown, SystemEstimate
from .estimator import compose_breakdown, CostEstimator

__all__ = [
    "InsuranceRates",
    "RateTable",
    "RateTableModel",
    "load_rate_table",
    "default_rate_table",
    "launch_cost",
    "InsuranceEstimate",
    "estimate_insurance",
    "DEFAULT_INSURANCE_NOTES",
    "CostBreakdown",
    "SystemEstimate",
    "compose_breakdown",
    "CostEstimator",
]
