"""
orbitcost Test Configuration and Fixtures

Shared rate tables, systems and catalog for unit and integration tests.
"""

import pytest

from orbitcost.bom.items import BOMItem, Subsystem, OrbitalSystem
from orbitcost.core.enums import BOMCategory, SystemCategory
from orbitcost.cost.rates import InsuranceRates, RateTable


@pytest.fixture
def scenario_rates():
    """Single-vehicle table at $1000/kg, 20% contingency, no regulatory baseline."""
    return RateTable(
        launch_cost_per_kg_by_vehicle={"test_vehicle": 1000.0, "cheap_vehicle": 100.0},
        insurance=InsuranceRates(launch_rate=0.085, in_orbit_annual_rate=0.044, liability_rate=0.018),
        default_contingency_rate=0.2,
        regulatory_baseline_usd=0.0,
        default_vehicle="test_vehicle",
        version="test",
    )


@pytest.fixture
def scenario_items():
    return (
        BOMItem(name="Panel", category=BOMCategory.STRUCTURE, quantity=2,
                unit_mass_kg=100.0, unit_cost_usd=1000.0),
        BOMItem(name="Radio", category=BOMCategory.COMMUNICATIONS, quantity=1,
                unit_mass_kg=50.0, unit_cost_usd=500.0),
    )


@pytest.fixture
def scenario_system(scenario_items):
    """One subsystem, two items: 250 kg and $2,500 in total."""
    return OrbitalSystem(
        slug="scenario-sat",
        name="Scenario Satellite",
        category=SystemCategory.SCIENCE,
        total_mass_kg=250.0,
        tech_readiness_level=7,
        subsystems=(
            Subsystem(name="Bus", mass_kg=250.0, cost_usd=2500.0, items=scenario_items),
        ),
        assembly_factor=0.1,
        testing_factor=0.1,
        annual_operating_cost_usd=0.0,
    )


@pytest.fixture
def default_rates():
    from orbitcost.cost.rates import default_rate_table
    return default_rate_table()


@pytest.fixture
def default_catalog():
    from orbitcost.catalog import load_default_catalog
    return load_default_catalog()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ORBITCOST_* variables and the cached config."""
    import os
    from orbitcost.bootstrap.config import reset_config

    for key in list(os.environ):
        if key.startswith("ORBITCOST_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()
