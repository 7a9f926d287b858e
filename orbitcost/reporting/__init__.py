"""
reporting/ - Display formatting and cost reports.
"""

from .formatting import format_cost_compact, format_mass
from .cost_report import ReportTable, build_cost_report, render_cost_report

__all__ = [
    "format_cost_compact",
    "format_mass",
    "ReportTable",
    "build_cost_report",
    "render_cost_report",
]
