"""
bom/ - Bill of Materials

Hierarchical BOM records and their aggregation.
"""

from .items import BOMItem, Subsystem, OrbitalSystem
from .aggregator import Totals, aggregate, aggregate_subsystem, aggregate_system

__all__ = [
    "BOMItem",
    "Subsystem",
    "OrbitalSystem",
    "Totals",
    "aggregate",
    "aggregate_subsystem",
    "aggregate_system",
]
