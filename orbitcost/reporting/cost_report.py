"""
reporting/cost_report.py - Cost report for a system estimate.

Builds a dictionary report (summary, line-item table, insurance block,
consistency findings) and renders it as markdown-style text.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..cost.schema import SystemEstimate
from .formatting import format_cost_compact, format_mass


@dataclass
class ReportTable:
    """Report table."""
    title: str
    headers: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)

    def add_row(self, *values) -> None:
        """Add a row to the table."""
        self.rows.append(list(values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "headers": self.headers,
            "rows": self.rows,
            "row_count": len(self.rows),
        }

    def to_markdown(self) -> str:
        lines = [f"### {self.title}", ""]
        lines.append("| " + " | ".join(self.headers) + " |")
        lines.append("|" + "|".join("---" for _ in self.headers) + "|")
        for row in self.rows:
            lines.append("| " + " | ".join(str(v) for v in row) + " |")
        return "\n".join(lines)


def _share(amount: int, total: int) -> str:
    if total <= 0:
        return "0.0%"
    return f"{amount / total:.1%}"


def _breakdown_table(estimate: SystemEstimate) -> ReportTable:
    breakdown = estimate.breakdown
    table = ReportTable(
        title="Cost Breakdown",
        headers=["Line Item", "Amount", "Compact", "Share"],
    )
    for _, label, amount in breakdown.line_items():
        table.add_row(label, f"${amount:,}", format_cost_compact(amount), _share(amount, breakdown.total))
    table.add_row("**Total**", f"**${breakdown.total:,}**", format_cost_compact(breakdown.total), "100.0%")
    return table


def _insurance_table(estimate: SystemEstimate) -> ReportTable:
    insurance = estimate.insurance
    table = ReportTable(
        title="Insurance (Year 1)",
        headers=["Coverage", "Rate", "Premium"],
    )
    table.add_row("Launch", f"{insurance.launch_premium_rate:.1%}", f"${insurance.launch_premium_usd:,}")
    table.add_row("In-orbit (annual)", f"{insurance.in_orbit_premium_rate:.1%}", f"${insurance.in_orbit_annual_usd:,}")
    table.add_row("Third-party liability", f"{insurance.liability_rate:.1%}", f"${insurance.liability_annual_usd:,}")
    table.add_row("**Total**", "", f"**${insurance.total_first_year_usd:,}**")
    return table


def build_cost_report(estimate: SystemEstimate) -> Dict[str, Any]:
    """Assemble the report as a dictionary."""
    summary = (
        f"{estimate.name}: estimated {format_cost_compact(estimate.breakdown.total)} "
        f"all-in for {format_mass(estimate.mass_kg)} launched on {estimate.vehicle} "
        f"(TRL {estimate.trl}, {estimate.trl_label}; risk {estimate.risk_tier.value})."
    )
    return {
        "title": f"Cost Estimate: {estimate.name}",
        "slug": estimate.slug,
        "summary": summary,
        "rate_table_version": estimate.rate_table_version,
        "tables": [
            _breakdown_table(estimate).to_dict(),
            _insurance_table(estimate).to_dict(),
        ],
        "insured_value": estimate.insurance.insured_value,
        "insurance_notes": estimate.insurance.notes,
        "warnings": [v.message for v in estimate.violations],
    }


def render_cost_report(estimate: SystemEstimate) -> str:
    """Render the report as markdown text."""
    report = build_cost_report(estimate)
    parts = [f"## {report['title']}", "", report["summary"], ""]
    parts.append(_breakdown_table(estimate).to_markdown())
    parts.append("")
    parts.append(_insurance_table(estimate).to_markdown())
    parts.append("")
    parts.append(f"Insured value: ${report['insured_value']:,}. {report['insurance_notes']}")

    if report["warnings"]:
        parts.append("")
        parts.append("### Consistency Warnings")
        parts.append("")
        parts.extend(f"- {w}" for w in report["warnings"])

    return "\n".join(parts) + "\n"
