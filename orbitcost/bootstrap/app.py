"""
bootstrap/app.py - Application builder.

Wires configuration to the rate table, catalog and estimator.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
import logging

from ..catalog import Catalog, load_catalog, load_default_catalog
from ..cost import CostEstimator, RateTable, default_rate_table, load_rate_table
from ..validators import ValidationTolerance
from .config import OrbitCostConfig, load_config

logger = logging.getLogger("bootstrap.app")


class AppState(Enum):
    """Application lifecycle states."""
    CREATED = "created"
    CONFIGURING = "configuring"
    READY = "ready"
    FAILED = "failed"


class OrbitCostApp:
    """
    Main application class.

    ``build()`` loads configuration (unless one was given), then the rate
    table and catalog it points to, and constructs the estimator.
    """

    def __init__(self, config_file: Optional[str] = None, config: Optional[OrbitCostConfig] = None):
        self._config_file = config_file
        self._config = config
        self._rate_table: Optional[RateTable] = None
        self._catalog: Optional[Catalog] = None
        self._estimator: Optional[CostEstimator] = None
        self.state = AppState.CREATED

    @property
    def config(self) -> OrbitCostConfig:
        return self._config

    @property
    def rate_table(self) -> RateTable:
        self._require_built()
        return self._rate_table

    @property
    def catalog(self) -> Catalog:
        self._require_built()
        return self._catalog

    @property
    def estimator(self) -> CostEstimator:
        self._require_built()
        return self._estimator

    @property
    def is_built(self) -> bool:
        return self.state == AppState.READY

    def build(self) -> "OrbitCostApp":
        """Build the application."""
        self.state = AppState.CONFIGURING
        try:
            if self._config is None:
                self._config = load_config(self._config_file)
            config = self._config

            if config.rates_file:
                self._rate_table = load_rate_table(config.rates_file)
            else:
                self._rate_table = default_rate_table()

            if config.catalog_file:
                self._catalog = load_catalog(config.catalog_file)
            else:
                self._catalog = load_default_catalog()

            tolerance = ValidationTolerance(
                relative=config.tolerance.relative,
                absolute=config.tolerance.absolute,
            )
            self._estimator = CostEstimator(
                self._rate_table,
                vehicle=config.vehicle,
                tolerance=tolerance,
            )
            if config.vehicle:
                # Raises UnknownVehicle for a vehicle missing from the table
                self._rate_table.cost_per_kg(config.vehicle)
        except Exception:
            self.state = AppState.FAILED
            raise

        self.state = AppState.READY
        logger.info(
            f"Application built: rates '{self._rate_table.version}', "
            f"{len(self._catalog)} systems, vehicle={config.vehicle or self._rate_table.default_vehicle}"
        )
        return self

    def _require_built(self) -> None:
        if self.state != AppState.READY:
            raise RuntimeError("Application not built; call build() first")
