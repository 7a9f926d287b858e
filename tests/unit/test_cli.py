"""
Unit tests for the orbitcost CLI.
"""

import json
import logging

import pytest

from orbitcost.bootstrap.entrypoints import build_parser, cli_main
from orbitcost.cli import CommandRegistry, CommandResult, OutputFormat, command_registry, format_output
from orbitcost.cli.commands import EstimateCommand, register_default_commands


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers installed by cli_main and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_orbitcost", False):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def run_cli(clean_env, tmp_path, capsys):
    """Run cli_main away from any local config; returns (exit_code, stdout)."""
    clean_env.chdir(tmp_path)
    clean_env.setenv("HOME", str(tmp_path))

    def _run(*args):
        code = cli_main(list(args))
        return code, capsys.readouterr().out

    return _run


class TestRegistry:
    """Tests for CommandRegistry."""

    def test_default_commands(self):
        registry = register_default_commands(CommandRegistry())
        assert registry.list_commands() == ["list", "categories", "estimate", "validate", "sensitivity"]
        assert isinstance(registry.get("est"), EstimateCommand)
        assert registry.get("missing") is None

    def test_register_is_idempotent(self):
        registry = register_default_commands(CommandRegistry())
        register_default_commands(registry)
        assert len(registry.get_all()) == 5

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_global_registry(self):
        """The shared registry is populated when the parser is built."""
        build_parser()
        assert isinstance(command_registry, CommandRegistry)
        assert command_registry.list_commands() == ["list", "categories", "estimate", "validate", "sensitivity"]

    def test_parser_alias(self):
        parsed = build_parser().parse_args(["est", "space-tug", "--vehicle", "starship"])
        assert parsed.slug == "space-tug"
        assert parsed.vehicle == "starship"


class TestFormatOutput:
    """Tests for format_output()."""

    def test_text_prefers_preformatted(self):
        result = CommandResult(message="m", data={"a": 1}, text="pretty")
        assert format_output(result, OutputFormat.TEXT) == "pretty"

    def test_text_failure(self):
        assert format_output(CommandResult.failure("boom"), OutputFormat.TEXT) == "Error: boom"

    def test_json(self):
        data = json.loads(format_output(CommandResult(message="m", data=[1]), OutputFormat.JSON))
        assert data == {"success": True, "message": "m", "data": [1], "error": None}


    def test_table(self):
        result = CommandResult(data=[{"a": 1, "b": "x"}, {"a": 2, "b": "y"}])
        lines = format_output(result, OutputFormat.TABLE).splitlines()
        assert lines[0] == "a | b"
        assert lines[2:] == ["1 | x", "2 | y"]

    def test_minimal(self):
        assert format_output(CommandResult(data=5), OutputFormat.MINIMAL) == "5"
        assert format_output(CommandResult(), OutputFormat.MINIMAL) == ""
        assert format_output(CommandResult.failure("boom"), OutputFormat.MINIMAL) == "boom"


class TestCommands:
    """End-to-end command runs through cli_main()."""

    def test_list(self, run_cli):
        code, out = run_cli("list")
        assert code == 0
        assert "habitat-small" in out
        assert "22.0t" in out

    def test_list_json_by_category(self, run_cli):
        code, out = run_cli("--json", "list", "--category", "services")
        assert code == 0
        slugs = [row["slug"] for row in json.loads(out)["data"]]
        assert slugs == ["space-tug", "debris-removal"]

    def test_categories(self, run_cli):
        code, out = run_cli("--json", "categories")
        rows = json.loads(out)["data"]
        assert len(rows) == 6
        assert {"value": "manufacturing", "label": "Manufacturing", "count": 0} in rows

    def test_estimate_json(self, run_cli):
        code, out = run_cli("--json", "estimate", "habitat-small")
        assert code == 0
        data = json.loads(out)["data"]
        assert data["vehicle"] == "falcon_heavy"
        assert data["breakdown"]["total"] == 787_238_180
        assert data["is_consistent"] is True

    def test_estimate_text(self, run_cli):
        code, out = run_cli("estimate", "habitat-small", "--vehicle", "starship")
        assert code == 0
        assert "## Cost Estimate: Orbital Habitat" in out
        assert "starship" in out

    def test_estimate_unknown_slug(self, run_cli):
        code, out = run_cli("--json", "estimate", "nope")
        assert code == 1
        payload = json.loads(out)
        assert payload["success"] is False
        assert payload["data"]["code"] == "ORB_001"

    def test_estimate_unknown_vehicle(self, run_cli):
        code, out = run_cli("estimate", "habitat-small", "--vehicle", "saturn_v")
        assert code == 1
        assert out.startswith("Error: [ORB_002]")

    def test_validate_catalog(self, run_cli):
        code, out = run_cli("validate")
        assert code == 0
        assert "habitat-small: OK" in out

    def test_validate_reports_drift(self, run_cli, tmp_path):
        """Drifted catalog makes validate exit non-zero."""
        (tmp_path / "catalog.yaml").write_text(
            "systems:\n"
            "  - slug: drift\n"
            "    name: Drift\n"
            "    category: science\n"
            "    total_mass_kg: 1250\n"
            "    tech_readiness_level: 6\n"
            "    subsystems:\n"
            "      - name: Bus\n"
            "        mass_kg: 250\n"
            "        cost_usd: 2500\n"
            "        items:\n"
            "          - {name: Panel, category: structure, quantity: 2, unit_mass_kg: 100, unit_cost_usd: 1000}\n"
            "          - {name: Radio, category: communications, quantity: 1, unit_mass_kg: 50, unit_cost_usd: 500}\n"
        )
        (tmp_path / "orbitcost.json").write_text(json.dumps({"catalog_file": "catalog.yaml"}))
        code, out = run_cli("validate", "drift")
        assert code == 1
        assert "drift: 1 violation(s)" in out

    def test_sensitivity(self, run_cli):
        code, out = run_cli("--json", "sensitivity", "space-tug", "--vehicles", "starship", "vulcan")
        assert code == 0
        data = json.loads(out)["data"]
        assert list(data) == ["starship", "vulcan"]
        assert data["starship"]["launch"] == 700_000

    def test_format_table(self, run_cli):
        code, out = run_cli("--format", "table", "categories")
        assert code == 0
        lines = out.splitlines()
        assert lines[0] == "value | label | count"
        assert "habitat | Orbital Habitats | 1" in lines

    def test_format_minimal_failure(self, run_cli):
        code, out = run_cli("--format", "minimal", "estimate", "nope")
        assert code == 1
        assert out.startswith("[ORB_001] Unknown system 'nope'")

    def test_format_minimal_success(self, run_cli):
        code, out = run_cli("--format", "minimal", "categories")
        assert code == 0
        assert "'label': 'Orbital Services'" in out

    def test_json_flag_overrides_format(self, run_cli):
        code, out = run_cli("--json", "--format", "table", "categories")
        assert json.loads(out)["success"] is True

    def test_debug_config_enables_debug_logging(self, run_cli, clean_env):
        clean_env.setenv("ORBITCOST_DEBUG", "true")
        code, _ = run_cli("list")
        assert code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_bad_config_file(self, run_cli, tmp_path):
        """An unreadable config file fails startup with exit code 1."""
        bad = tmp_path / "bad.json"
        bad.write_text("{oops")
        code, _ = run_cli("-c", str(bad), "list")
        assert code == 1


def test_command_result_failure_defaults():
    result = CommandResult.failure("x", data={"k": 1})
    assert not result.success
    assert result.exit_code == 1
    assert result.to_dict()["data"] == {"k": 1}
