"""
cost/rates.py - Launch and insurance rate tables.

A RateTable is the immutable set of market assumptions the estimator
prices against: launch cost per kilogram by vehicle, insurance rates,
default contingency and the regulatory baseline. Tables load from
JSON or YAML files validated by a pydantic schema.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union
import json
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigurationError, InvalidInput, UnknownVehicle, require_fraction, require_non_negative

logger = logging.getLogger(__name__)

DEFAULT_RATES_FILE = Path(__file__).resolve().parent.parent / "data" / "rates_default.json"


# =============================================================================
# RATE TABLE
# =============================================================================

@dataclass(frozen=True)
class InsuranceRates:
    """Insurance rates as fractions of insured value."""
    launch_rate: float
    in_orbit_annual_rate: float
    liability_rate: float = 0.0

    def __post_init__(self):
        require_fraction(self.launch_rate, "launch_rate")
        require_fraction(self.in_orbit_annual_rate, "in_orbit_annual_rate")
        require_fraction(self.liability_rate, "liability_rate")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "launch_rate": self.launch_rate,
            "in_orbit_annual_rate": self.in_orbit_annual_rate,
            "liability_rate": self.liability_rate,
        }


@dataclass(frozen=True)
class RateTable:
    """
    Market assumptions used to price a system.

    The vehicle mapping is exposed read-only. A table shared between
    threads cannot be modified after construction.
    """
    launch_cost_per_kg_by_vehicle: Mapping[str, float]
    insurance: InsuranceRates
    default_contingency_rate: float
    regulatory_baseline_usd: float = 0.0
    default_vehicle: Optional[str] = None
    version: str = "custom"

    def __post_init__(self):
        costs = dict(self.launch_cost_per_kg_by_vehicle)
        for vehicle, cost_per_kg in costs.items():
            require_non_negative(cost_per_kg, f"launch cost per kg for '{vehicle}'")
        require_fraction(self.default_contingency_rate, "default_contingency_rate")
        require_non_negative(self.regulatory_baseline_usd, "regulatory_baseline_usd")
        if self.default_vehicle is not None and self.default_vehicle not in costs:
            raise UnknownVehicle(self.default_vehicle, costs.keys())
        object.__setattr__(self, "launch_cost_per_kg_by_vehicle", MappingProxyType(costs))

    @property
    def vehicles(self) -> list:
        """Vehicle keys in table order."""
        return list(self.launch_cost_per_kg_by_vehicle)

    def cost_per_kg(self, vehicle: str) -> float:
        """
        Launch cost per kilogram for a vehicle.

        Raises:
            UnknownVehicle: vehicle is not in the table
        """
        try:
            return self.launch_cost_per_kg_by_vehicle[vehicle]
        except KeyError:
            raise UnknownVehicle(vehicle, self.launch_cost_per_kg_by_vehicle.keys()) from None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "launch_cost_per_kg": dict(self.launch_cost_per_kg_by_vehicle),
            "default_vehicle": self.default_vehicle,
            "insurance": self.insurance.to_dict(),
            "default_contingency_rate": self.default_contingency_rate,
            "regulatory_baseline_usd": self.regulatory_baseline_usd,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RateTable":
        """
        Build a table from a dictionary in the rate file layout.

        Raises:
            InvalidInput: dictionary does not match the rate file schema
        """
        try:
            model = RateTableModel.model_validate(data)
        except ValidationError as e:
            raise InvalidInput(f"Invalid rate table: {e}") from e
        return model.to_rate_table()


# =============================================================================
# FILE SCHEMA
# =============================================================================

class InsuranceRatesModel(BaseModel):
    """Insurance block of a rate file."""
    model_config = ConfigDict(extra="forbid")

    launch_rate: float = Field(..., ge=0, le=1)
    in_orbit_annual_rate: float = Field(..., ge=0, le=1)
    liability_rate: float = Field(default=0.0, ge=0, le=1)


class RateTableModel(BaseModel):
    """Rate file schema (JSON or YAML)."""
    model_config = ConfigDict(extra="forbid")

    version: str = "custom"
    launch_cost_per_kg: Dict[str, float]
    default_vehicle: Optional[str] = None
    insurance: InsuranceRatesModel
    default_contingency_rate: float = Field(..., ge=0, le=1)
    regulatory_baseline_usd: float = Field(default=0.0, ge=0)

    def to_rate_table(self) -> RateTable:
        return RateTable(
            launch_cost_per_kg_by_vehicle=self.launch_cost_per_kg,
            insurance=InsuranceRates(
                launch_rate=self.insurance.launch_rate,
                in_orbit_annual_rate=self.insurance.in_orbit_annual_rate,
                liability_rate=self.insurance.liability_rate,
            ),
            default_contingency_rate=self.default_contingency_rate,
            regulatory_baseline_usd=self.regulatory_baseline_usd,
            default_vehicle=self.default_vehicle,
            version=self.version,
        )


# =============================================================================
# LOADERS
# =============================================================================

def read_structured_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON or YAML file into a dictionary.

    Raises:
        ConfigurationError: file missing, unreadable, unparsable, or of
            an unsupported suffix
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"File not found: {path}", value=str(path))

    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                raise ConfigurationError(f"Unsupported file format: {suffix}", value=str(path))
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read {path}: {e}", value=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at top level of {path}", value=str(path))
    return data


def load_rate_table(path: Union[str, Path]) -> RateTable:
    """Load a rate table from a JSON or YAML file."""
    table = RateTable.from_dict(read_structured_file(path))
    logger.info(f"Loaded rate table '{table.version}' from {path} ({len(table.vehicles)} vehicles)")
    return table


def default_rate_table() -> RateTable:
    """Rate table shipped with the package."""
    return load_rate_table(DEFAULT_RATES_FILE)
