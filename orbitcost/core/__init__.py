"""
orbitcost core - shared enumerations and numeric utilities.
"""

from .enums import BOMCategory, SystemCategory, RiskTier
from .utils import round_usd, determinize_dict, relative_delta

__all__ = [
    "BOMCategory",
    "SystemCategory",
    "RiskTier",
    "round_usd",
    "determinize_dict",
    "relative_delta",
]
