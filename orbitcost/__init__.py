"""
orbitcost - Hierarchical cost and risk rollup for orbital systems.

Turns a bill-of-materials description of an orbital system into a
validated estimate: mass, procurement, launch, assembly, testing,
operations, insurance, regulatory overhead and contingency.
"""

from .bom import BOMItem, Subsystem, OrbitalSystem, Totals, aggregate
from .catalog import Catalog, load_catalog, load_default_catalog
from .core import BOMCategory, SystemCategory, RiskTier
from .cost import (
    CostBreakdown,
    CostEstimator,
    InsuranceEstimate,
    RateTable,
    SystemEstimate,
    compose_breakdown,
    default_rate_table,
    estimate_insurance,
    launch_cost,
    load_rate_table,
)
from .errors import OrbitCostError, InvalidInput, UnknownVehicle
from .validators import Violation, ValidationTolerance, validate

__version__ = "1.0.0"
