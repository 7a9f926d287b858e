"""
lookup/ - Classification lookups (TRL labels, risk tiers, categories).
"""

from .classification import (
    TRL_LABELS,
    CATEGORY_LABELS,
    CategorySummary,
    trl_label,
    trl_risk_tier,
    parse_category,
    category_label,
    categorize,
    category_summaries,
)

__all__ = [
    "TRL_LABELS",
    "CATEGORY_LABELS",
    "CategorySummary",
    "trl_label",
    "trl_risk_tier",
    "parse_category",
    "category_label",
    "categorize",
    "category_summaries",
]
