import math
from datetime import date, datetime, time
from typing import Any, Optional


def to_int(value: Any) -> Optional[int]:
    """
    Coerce a loosely typed request value into an int.

    Empty strings, None and unparseable values become None so that a missing
    counter is stored as NULL rather than as an ambiguous placeholder.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        pass
    # "3.0" style input keeps its integer part
    try:
        return int(float(str(value).strip()))
    except (ValueError, TypeError, OverflowError):
        return None


def to_number(value: Any) -> Optional[float]:
    """Coerce a request value into a float, or None if it is empty or not numeric."""
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def count_or_zero(value: Any) -> int:
    """Aggregation boundary: an absent counter counts as 0."""
    parsed = to_int(value)
    return parsed if parsed is not None else 0


def iso_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    return str(value)
