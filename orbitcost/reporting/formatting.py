"""
reporting/formatting.py - Compact display formatting for cost and mass.

Output does not depend on locale: no thousands separators, '.' as the
decimal point, halves rounded away from zero on the exact binary value.
"""

from decimal import Decimal, ROUND_HALF_UP


def _fixed(value: float, digits: int) -> str:
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_cost_compact(usd: float) -> str:
    """
    Format a USD amount compactly.

    Examples: 1.4e9 -> '$1.4B', 4e8 -> '$400M', 5000 -> '$5K', 12 -> '$12'
    """
    if usd >= 1_000_000_000:
        return f"${_fixed(usd / 1_000_000_000, 1)}B"
    if usd >= 1_000_000:
        return f"${_fixed(usd / 1_000_000, 0)}M"
    if usd >= 1_000:
        return f"${_fixed(usd / 1_000, 0)}K"
    return f"${_fixed(usd, 0)}"


def format_mass(kg: float) -> str:
    """
    Format a mass compactly.

    Examples: 1.2e6 -> '1.2M kg', 22000 -> '22.0t', 604 -> '604 kg'
    """
    if kg >= 1_000_000:
        return f"{_fixed(kg / 1_000_000, 1)}M kg"
    if kg >= 1_000:
        return f"{_fixed(kg / 1_000, 1)}t"
    return f"{_fixed(kg, 0)} kg"
