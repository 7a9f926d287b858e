"""
bom/aggregator.py - BOM aggregation.

Sums mass and cost over any parts exposing ``mass_kg`` and ``cost_usd``.
The same routine rolls items into a subsystem and subsystems into a
system; inputs are validated before anything is summed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
import logging

from ..errors import InvalidInput, require_non_negative
from .items import BOMItem, Subsystem, OrbitalSystem

logger = logging.getLogger(__name__)


# =============================================================================
# TOTALS
# =============================================================================

@dataclass(frozen=True)
class Totals:
    """Aggregated mass and cost of a group of parts."""
    mass_kg: float = 0.0
    cost_usd: float = 0.0
    item_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mass_kg": self.mass_kg,
            "cost_usd": self.cost_usd,
            "item_count": self.item_count,
        }


# =============================================================================
# VALIDATION
# =============================================================================

def _check_item(item: BOMItem, path: str) -> None:
    quantity = item.quantity
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        raise InvalidInput(
            f"Quantity of '{item.name}' must be an integer, got {quantity!r}",
            value=quantity, path=path,
        )
    if isinstance(quantity, float) and not quantity.is_integer():
        raise InvalidInput(
            f"Quantity of '{item.name}' must be a whole number, got {quantity}",
            value=quantity, path=path,
        )
    require_non_negative(quantity, f"quantity of '{item.name}'", path)
    require_non_negative(item.unit_mass_kg, f"unit_mass_kg of '{item.name}'", path)
    require_non_negative(item.unit_cost_usd, f"unit_cost_usd of '{item.name}'", path)


def _check_part(part: Any, path: str) -> None:
    if isinstance(part, BOMItem):
        _check_item(part, path)
    label = getattr(part, "name", path)
    require_non_negative(part.mass_kg, f"mass_kg of '{label}'", path)
    require_non_negative(part.cost_usd, f"cost_usd of '{label}'", path)


# =============================================================================
# AGGREGATION
# =============================================================================

def aggregate(parts: Iterable[Any], path: Optional[str] = None) -> Totals:
    """
    Sum mass and cost over a sequence of parts.

    Each part must expose ``mass_kg`` and ``cost_usd``. BOM items count
    as one item each; parts that carry their own ``item_count`` (Totals,
    Subsystem) contribute that count.

    Args:
        parts: BOM items, subsystems or Totals
        path: Optional location prefix used in error messages

    Returns:
        Totals with summed mass, cost and item count

    Raises:
        InvalidInput: negative mass/cost, or a negative or non-integral quantity
    """
    mass_kg = 0.0
    cost_usd = 0.0
    item_count = 0

    for index, part in enumerate(parts):
        part_path = f"{path}[{index}]" if path else f"[{index}]"
        _check_part(part, part_path)
        mass_kg += part.mass_kg
        cost_usd += part.cost_usd
        item_count += getattr(part, "item_count", 1)

    return Totals(mass_kg=mass_kg, cost_usd=cost_usd, item_count=item_count)


def aggregate_subsystem(subsystem: Subsystem, path: Optional[str] = None) -> Totals:
    """
    Recompute a subsystem's totals from its items.

    A subsystem with no items contributes its declared values.
    """
    path = path or subsystem.name
    if not subsystem.items:
        _check_part(subsystem, path)
        logger.debug(f"Subsystem '{subsystem.name}' has no items, using declared totals")
        return Totals(mass_kg=subsystem.mass_kg, cost_usd=subsystem.cost_usd, item_count=0)

    totals = aggregate(subsystem.items, path=f"{path}.items")
    logger.debug(
        f"Subsystem '{subsystem.name}': {totals.mass_kg:.1f} kg, "
        f"${totals.cost_usd:,.0f} over {totals.item_count} items"
    )
    return totals


def aggregate_system(system: OrbitalSystem) -> Totals:
    """Recompute a system's totals bottom-up from its subsystems' items."""
    subsystem_totals = [
        aggregate_subsystem(sub, path=f"{system.slug}.subsystems[{i}]")
        for i, sub in enumerate(system.subsystems)
    ]
    totals = aggregate(subsystem_totals, path=f"{system.slug}.subsystems")
    logger.debug(
        f"System '{system.slug}': {totals.mass_kg:.1f} kg, ${totals.cost_usd:,.0f}"
    )
    return totals
