"""
orbitcost core utilities.

Numeric helpers shared by the aggregation, cost and validation layers.
"""

from __future__ import annotations
import json
import math
from typing import Any, Dict


def round_usd(value: float) -> int:
    """
    Round a currency amount to the nearest whole unit, halves rounding up.

    Python's built-in round() uses banker's rounding, which would make
    premiums and contingency depend on the parity of the integer part.

    Args:
        value: Amount in USD (expected non-negative)

    Returns:
        Whole-unit amount as int
    """
    return int(math.floor(value + 0.5))


def determinize_dict(data: Dict[str, Any], precision: int = 6) -> Dict[str, Any]:
    """
    Make a dictionary deterministic for hashing and serialization.

    Operations:
    - Sorts all keys recursively
    - Rounds floats to consistent precision
    - Converts enums to their values and tuples to lists

    Args:
        data: Dictionary to determinize
        precision: Float rounding precision (default: 6)

    Returns:
        Deterministic dictionary with sorted keys and rounded floats
    """
    def _process(obj: Any) -> Any:
        if isinstance(obj, bool) or obj is None:
            return obj
        elif isinstance(obj, float):
            return round(obj, precision)
        elif isinstance(obj, (int, str)):
            return obj.value if hasattr(obj, "value") else obj
        elif isinstance(obj, dict):
            processed_items = {str(_process(k)): _process(v) for k, v in obj.items()}
            return dict(sorted(processed_items.items()))
        elif isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        elif hasattr(obj, "value"):
            return _process(obj.value)
        else:
            # Convert unknown types to string
            return str(obj)

    processed = _process(data)
    # Serialize and deserialize to ensure consistent structure
    return json.loads(json.dumps(processed, sort_keys=True))


def relative_delta(actual: float, expected: float) -> float:
    """Relative difference of actual vs expected; 0.0 when expected is zero."""
    if abs(expected) < 1e-10:
        return 0.0
    return (actual - expected) / abs(expected)
