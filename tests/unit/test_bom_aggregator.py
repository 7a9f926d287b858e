"""
Unit tests for BOM records and aggregation.

Tests BOMItem line totals, aggregate(), aggregate_subsystem() and
aggregate_system().
"""

import dataclasses

import pytest

from orbitcost.bom.items import BOMItem, Subsystem, OrbitalSystem
from orbitcost.bom.aggregator import Totals, aggregate, aggregate_subsystem, aggregate_system
from orbitcost.core.enums import BOMCategory, SystemCategory
from orbitcost.errors import InvalidInput


def _item(name="Item", quantity=1, mass=10.0, cost=100.0, category=BOMCategory.STRUCTURE):
    return BOMItem(name=name, category=category, quantity=quantity,
                   unit_mass_kg=mass, unit_cost_usd=cost)


class TestBOMItem:
    """Tests for BOMItem."""

    def test_line_totals(self):
        """Line mass and cost are quantity times unit values."""
        item = _item(quantity=16, mass=5.0, cost=500_000.0)
        assert item.mass_kg == 80.0
        assert item.cost_usd == 8_000_000.0

    def test_zero_quantity(self):
        """Zero quantity contributes nothing."""
        item = _item(quantity=0, mass=5.0, cost=100.0)
        assert item.mass_kg == 0
        assert item.cost_usd == 0

    def test_frozen(self):
        """Records cannot be modified in place."""
        item = _item()
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.quantity = 3

    def test_to_dict(self):
        """Serialization uses enum values and includes line totals."""
        data = _item(name="Tank", quantity=4, mass=120.0, cost=1.5e6,
                     category=BOMCategory.PROPULSION).to_dict()
        assert data["category"] == "propulsion"
        assert data["mass_kg"] == 480.0
        assert data["cost_usd"] == 6e6


class TestAggregate:
    """Tests for aggregate()."""

    def test_empty(self):
        """No parts sum to zero."""
        assert aggregate([]) == Totals(0.0, 0.0, 0)

    def test_scenario_items(self, scenario_items):
        """Two items aggregate to 250 kg and $2,500."""
        totals = aggregate(scenario_items)
        assert totals.mass_kg == 250.0
        assert totals.cost_usd == 2500.0
        assert totals.item_count == 2

    def test_sum_law(self):
        """Aggregate equals the sum of quantity times unit values."""
        items = [_item(quantity=q, mass=m, cost=c)
                 for q, m, c in [(3, 25.0, 5e6), (4, 150.0, 3e6), (2, 8.0, 1.5e6), (1, 604.0, 0.0)]]
        totals = aggregate(items)
        assert totals.mass_kg == pytest.approx(sum(i.quantity * i.unit_mass_kg for i in items))
        assert totals.cost_usd == pytest.approx(sum(i.quantity * i.unit_cost_usd for i in items))

    def test_totals_are_aggregable(self):
        """Totals can be aggregated again, carrying their item counts."""
        first = aggregate([_item(), _item()])
        second = aggregate([_item()])
        combined = aggregate([first, second])
        assert combined.mass_kg == 30.0
        assert combined.cost_usd == 300.0
        assert combined.item_count == 3

    def test_negative_quantity_rejected(self):
        """Negative quantity raises InvalidInput with the part path."""
        with pytest.raises(InvalidInput) as exc_info:
            aggregate([_item(), _item(quantity=-1)], path="sub.items")
        assert exc_info.value.path == "sub.items[1]"

    def test_fractional_quantity_rejected(self):
        """Non-integral quantity raises InvalidInput."""
        with pytest.raises(InvalidInput, match="whole number"):
            aggregate([_item(quantity=1.5)])

    def test_integral_float_quantity_accepted(self):
        """A float quantity with no fractional part is accepted."""
        assert aggregate([_item(quantity=2.0, mass=10.0)]).mass_kg == 20.0

    def test_negative_unit_mass_rejected(self):
        """Negative unit mass raises InvalidInput."""
        with pytest.raises(InvalidInput, match="unit_mass_kg"):
            aggregate([_item(mass=-1.0)])

    def test_negative_unit_cost_rejected(self):
        """Negative unit cost raises InvalidInput."""
        with pytest.raises(InvalidInput, match="unit_cost_usd"):
            aggregate([_item(cost=-5.0)])

    def test_negative_declared_part_rejected(self):
        """Negative declared mass on a non-item part raises InvalidInput."""
        with pytest.raises(InvalidInput):
            aggregate([Subsystem(name="Bad", mass_kg=-10.0, cost_usd=0.0)])


class TestSubsystemAndSystem:
    """Tests for aggregate_subsystem() and aggregate_system()."""

    def test_subsystem_recomputes_from_items(self, scenario_items):
        """Declared values are ignored when items exist."""
        sub = Subsystem(name="Bus", mass_kg=9999.0, cost_usd=1.0, items=scenario_items)
        totals = aggregate_subsystem(sub)
        assert totals.mass_kg == 250.0
        assert totals.cost_usd == 2500.0

    def test_itemless_subsystem_uses_declared(self):
        """A subsystem without items contributes its declared values."""
        sub = Subsystem(name="Allocation", mass_kg=400.0, cost_usd=7e6)
        totals = aggregate_subsystem(sub)
        assert totals == Totals(mass_kg=400.0, cost_usd=7e6, item_count=0)

    def test_system_rollup(self, scenario_items):
        """System totals sum recomputed subsystem totals."""
        system = OrbitalSystem(
            slug="two-subs",
            name="Two Subsystems",
            category=SystemCategory.SERVICES,
            total_mass_kg=0.0,
            tech_readiness_level=5,
            subsystems=(
                Subsystem(name="Bus", mass_kg=0.0, cost_usd=0.0, items=scenario_items),
                Subsystem(name="Margin", mass_kg=50.0, cost_usd=1000.0),
            ),
        )
        totals = aggregate_system(system)
        assert totals.mass_kg == 300.0
        assert totals.cost_usd == 3500.0
        assert totals.item_count == 2

    def test_system_error_path(self):
        """Errors inside a subsystem name the system, subsystem and item."""
        system = OrbitalSystem(
            slug="bad",
            name="Bad",
            category=SystemCategory.SCIENCE,
            total_mass_kg=0.0,
            tech_readiness_level=5,
            subsystems=(Subsystem(name="S", mass_kg=0.0, cost_usd=0.0, items=(_item(quantity=-2),)),),
        )
        with pytest.raises(InvalidInput) as exc_info:
            aggregate_system(system)
        assert exc_info.value.path == "bad.subsystems[0].items[0]"

    def test_display_name(self, scenario_system):
        """Variant is appended to the display name."""
        assert scenario_system.display_name == "Scenario Satellite"
        assert dataclasses.replace(scenario_system, variant="Small").display_name == "Scenario Satellite (Small)"
