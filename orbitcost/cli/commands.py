"""
cli/commands.py - Catalog, estimate and validation commands.
"""

from __future__ import annotations
import argparse
from typing import Any, Dict, List

from ..core.utils import determinize_dict
from ..reporting import format_cost_compact, format_mass, render_cost_report
from .core import CLICommand, CLIContext, CommandRegistry, CommandResult, command_registry


def _table(headers: List[str], rows: List[List[Any]]) -> str:
    widths = [max(len(str(h)), *(len(str(r[i])) for r in rows)) if rows else len(str(h))
              for i, h in enumerate(headers)]
    lines = ["  ".join(str(h).ljust(w) for h, w in zip(headers, widths))]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(str(v).ljust(w) for v, w in zip(row, widths)))
    return "\n".join(lines)


class ListCommand(CLICommand):
    """List catalog systems."""

    name = "list"
    description = "List systems in the catalog"
    aliases = ["ls"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--category", help="Only systems in this category")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        catalog = ctx.app.catalog
        systems = catalog.by_category(args.category) if args.category else list(catalog)

        data = [
            {
                "slug": s.slug,
                "name": s.display_name,
                "category": s.category.value,
                "mass_kg": s.total_mass_kg,
                "trl": s.tech_readiness_level,
            }
            for s in systems
        ]
        rows = [[d["slug"], d["name"], d["category"], format_mass(d["mass_kg"]), d["trl"]] for d in data]
        return CommandResult(
            message=f"{len(data)} system(s)",
            data=data,
            text=_table(["SLUG", "NAME", "CATEGORY", "MASS", "TRL"], rows),
        )


class CategoriesCommand(CLICommand):
    """Category counts."""

    name = "categories"
    description = "Show system counts per category"
    aliases = ["cats"]

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        data = [summary.to_dict() for summary in ctx.app.catalog.categories()]
        rows = [[d["value"], d["label"], d["count"]] for d in data]
        return CommandResult(
            message=f"{len(data)} categories",
            data=data,
            text=_table(["CATEGORY", "LABEL", "COUNT"], rows),
        )


class EstimateCommand(CLICommand):
    """Full estimate for one system."""

    name = "estimate"
    description = "Estimate cost and insurance for a system"
    aliases = ["est"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("slug", help="System slug")
        parser.add_argument("--vehicle", help="Launch vehicle (default from config or rate table)")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        system = ctx.app.catalog.get(args.slug)
        estimate = ctx.app.estimator.estimate(system, vehicle=args.vehicle)
        return CommandResult(
            message=f"{estimate.name}: {format_cost_compact(estimate.total_usd)} on {estimate.vehicle}",
            data=estimate.to_dict(),
            text=render_cost_report(estimate),
        )


class ValidateCommand(CLICommand):
    """BOM consistency check."""

    name = "validate"
    description = "Check declared BOM totals against recomputed values"
    aliases = ["check"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("slug", nargs="?", help="System slug (default: whole catalog)")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        catalog = ctx.app.catalog
        systems = [catalog.get(args.slug)] if args.slug else list(catalog)
        findings = ctx.app.estimator.validator.validate_catalog(systems)

        total = sum(len(v) for v in findings.values())
        data: Dict[str, Any] = {slug: [v.to_dict() for v in vs] for slug, vs in findings.items()}

        lines = []
        for slug, violations in findings.items():
            status = "OK" if not violations else f"{len(violations)} violation(s)"
            lines.append(f"{slug}: {status}")
            lines.extend(f"  - {v.path}: {v.message}" for v in violations)

        return CommandResult(
            success=True,
            message=f"{len(findings)} system(s) checked, {total} violation(s)",
            data=data,
            text="\n".join(lines),
            exit_code=1 if total else 0,
        )


class SensitivityCommand(CLICommand):
    """Launch vehicle sensitivity."""

    name = "sensitivity"
    description = "Price a system under each launch vehicle"
    aliases = ["vehicles"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("slug", help="System slug")
        parser.add_argument("--vehicles", nargs="+", help="Vehicle keys (default: all in rate table)")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        system = ctx.app.catalog.get(args.slug)
        results = ctx.app.estimator.price_across_vehicles(system, args.vehicles)

        data = determinize_dict({vehicle: b.to_dict() for vehicle, b in results.items()})
        rows = [
            [vehicle, format_cost_compact(b.launch), format_cost_compact(b.insurance), format_cost_compact(b.total)]
            for vehicle, b in results.items()
        ]
        return CommandResult(
            message=f"{system.display_name} across {len(results)} vehicle(s)",
            data=data,
            text=_table(["VEHICLE", "LAUNCH", "INSURANCE", "TOTAL"], rows),
        )


DEFAULT_COMMANDS = (
    ListCommand,
    CategoriesCommand,
    EstimateCommand,
    ValidateCommand,
    SensitivityCommand,
)


def register_default_commands(registry: CommandRegistry = command_registry) -> CommandRegistry:
    """Register the built-in commands."""
    for command_cls in DEFAULT_COMMANDS:
        if registry.get(command_cls.name) is None:
            registry.register(command_cls())
    return registry
