#!/usr/bin/env python3
"""
Catalog Estimate Runner

Estimates every system in the catalog on one launch vehicle and prints
a comparison table, followed by consistency findings.

Usage:
    python scripts/run_estimate.py
    python scripts/run_estimate.py --vehicle starship
    python scripts/run_estimate.py --config config/orbitcost.yaml --json
"""

import argparse
import json
import sys
import os

# Ensure orbitcost is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from orbitcost.bootstrap.app import OrbitCostApp
from orbitcost.bootstrap.entrypoints import setup_logging
from orbitcost.reporting import format_cost_compact, format_mass


def print_header(title: str):
    """Print a formatted header."""
    print("\n" + "=" * 78)
    print(f" {title}")
    print("=" * 78)


def run_estimates(config_file: str = None, vehicle: str = None, verbose: bool = True) -> list:
    """
    Estimate the whole catalog.

    Returns:
        List of SystemEstimate in catalog order
    """
    app = OrbitCostApp(config_file).build()
    estimates = app.estimator.estimate_many(app.catalog, vehicle=vehicle)

    if verbose:
        print_header(f"CATALOG ESTIMATES (rates: {app.rate_table.version})")
        print(f"{'SYSTEM':<42} {'MASS':>9} {'LAUNCH':>8} {'INSURE':>8} {'TOTAL':>8}  TRL")
        for est in estimates:
            b = est.breakdown
            print(
                f"{est.name[:42]:<42} {format_mass(est.mass_kg):>9} "
                f"{format_cost_compact(b.launch):>8} {format_cost_compact(b.insurance):>8} "
                f"{format_cost_compact(b.total):>8}  {est.trl} ({est.risk_tier.value})"
            )

        inconsistent = [e for e in estimates if not e.is_consistent]
        print(f"\n{len(estimates) - len(inconsistent)}/{len(estimates)} systems consistent")
        for est in inconsistent:
            for v in est.violations:
                print(f"  {v.path}: {v.message}")

    return estimates


def main():
    parser = argparse.ArgumentParser(description="Estimate every catalog system")
    parser.add_argument("-c", "--config", default=None, help="Configuration file")
    parser.add_argument("--vehicle", default=None, help="Launch vehicle key")
    parser.add_argument("--json", action="store_true", help="Print estimates as JSON")
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    args = parser.parse_args()

    setup_logging(level=args.log_level)
    estimates = run_estimates(args.config, args.vehicle, verbose=not args.json)
    if args.json:
        print(json.dumps([e.to_dict() for e in estimates], indent=2))
    return 0 if all(e.is_consistent for e in estimates) else 1


if __name__ == "__main__":
    sys.exit(main())
