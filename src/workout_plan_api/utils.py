"""Utility functions."""
import math
from typing import Optional


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s.strip()) if s is not None else None
    except Exception:
        return None


def floor_xp(value: float) -> int:
    """Round an XP estimate down to a whole, non-negative number."""
    return max(0, math.floor(value))
