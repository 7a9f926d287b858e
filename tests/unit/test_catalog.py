"""
Unit tests for catalog loading and lookup.
"""

import json

import pytest

from orbitcost.catalog import Catalog, load_catalog, parse_catalog
from orbitcost.core.enums import BOMCategory, SystemCategory
from orbitcost.errors import ConfigurationError, InvalidInput
from orbitcost.validators import validate


def _minimal_system(slug="probe", **overrides):
    data = {
        "slug": slug,
        "name": "Probe",
        "category": "science",
        "total_mass_kg": 100,
        "tech_readiness_level": 6,
        "subsystems": [
            {
                "name": "Bus",
                "mass_kg": 100,
                "cost_usd": 2000,
                "items": [
                    {"name": "Frame", "category": "structure", "quantity": 2,
                     "unit_mass_kg": 50, "unit_cost_usd": 1000},
                ],
            },
        ],
    }
    data.update(overrides)
    return data


class TestDefaultCatalog:
    """Tests for the catalog shipped with the package."""

    def test_contents(self, default_catalog):
        assert len(default_catalog) == 5
        assert default_catalog.slugs == [
            "habitat-small", "solar-array-small", "space-tug", "research-lab", "debris-removal",
        ]
        assert default_catalog.version == "2025.1"

    def test_all_consistent(self, default_catalog):
        """Every shipped system matches its own bill of materials."""
        for system in default_catalog:
            assert validate(system) == [], system.slug

    def test_habitat(self, default_catalog):
        habitat = default_catalog.get("habitat-small")
        assert habitat.display_name == "Orbital Habitat (Small (4 Crew))"
        assert habitat.category == SystemCategory.HABITAT
        assert habitat.total_mass_kg == 22_000
        assert habitat.procurement_usd == 400_000_000
        assert habitat.subsystems[2].name == "Power System"
        assert habitat.subsystems[0].items[1].category == BOMCategory.SHIELDING

    def test_get_unknown(self, default_catalog):
        with pytest.raises(InvalidInput, match="Unknown system 'nope'"):
            default_catalog.get("nope")

    def test_contains(self, default_catalog):
        assert "space-tug" in default_catalog
        assert "nope" not in default_catalog

    def test_by_category(self, default_catalog):
        assert [s.slug for s in default_catalog.by_category("services")] == ["space-tug", "debris-removal"]
        assert default_catalog.by_category(SystemCategory.MANUFACTURING) == []

    def test_by_unknown_category(self, default_catalog):
        with pytest.raises(InvalidInput):
            default_catalog.by_category("mining")


class TestParseCatalog:
    """Tests for parse_catalog() and load_catalog()."""

    def test_minimal(self):
        catalog = parse_catalog({"systems": [_minimal_system()]})
        system = catalog.get("probe")
        assert catalog.version == "1"
        assert system.subsystems[0].items[0].mass_kg == 100
        assert system.assembly_factor == 0.0
        assert system.procurement_usd is None
        assert validate(system) == []

    def test_duplicate_slug(self):
        with pytest.raises(InvalidInput, match="Duplicate system slug"):
            parse_catalog({"systems": [_minimal_system(), _minimal_system()]})

    def test_duplicate_slug_direct(self, scenario_system):
        with pytest.raises(InvalidInput):
            Catalog([scenario_system, scenario_system])

    @pytest.mark.parametrize("overrides", [
        {"surprise": 1},
        {"tech_readiness_level": 10},
        {"total_mass_kg": -1},
        {"category": "mining"},
        {"assembly_factor": 1.5},
    ])
    def test_invalid_records(self, overrides):
        """Unknown keys and out-of-range values are rejected."""
        with pytest.raises(InvalidInput, match="Invalid catalog"):
            parse_catalog({"systems": [_minimal_system(**overrides)]})

    def test_negative_item_quantity(self):
        system = _minimal_system()
        system["subsystems"][0]["items"][0]["quantity"] = -2
        with pytest.raises(InvalidInput):
            parse_catalog({"systems": [system]})

    def test_load_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"version": "t1", "systems": [_minimal_system()]}))
        catalog = load_catalog(path)
        assert catalog.version == "t1"
        assert catalog.slugs == ["probe"]

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "version: y1\n"
            "systems:\n"
            "  - slug: beacon\n"
            "    name: Beacon\n"
            "    category: infrastructure\n"
            "    total_mass_kg: 40\n"
            "    tech_readiness_level: 8\n"
            "    subsystems:\n"
            "      - name: Allocation\n"
            "        mass_kg: 40\n"
            "        cost_usd: 1000000\n"
        )
        catalog = load_catalog(path)
        beacon = catalog.get("beacon")
        assert beacon.category == SystemCategory.INFRASTRUCTURE
        assert beacon.subsystems[0].items == ()
        assert validate(beacon) == []

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError):
            load_catalog(path)
