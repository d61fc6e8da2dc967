"""
Time token normalization for treadmill lines.

Accepted forms, tried in order:
- "1:30"            -> 90
- "2.5 min", "45sec" -> 150, 45
- "30 push", "45 AO" -> bare number before a pace keyword is seconds
"""

import math
import re
from typing import Optional

COLON_TIME_PATTERN = re.compile(r'(\d{1,2}):(\d{2})')
UNIT_TIME_PATTERN = re.compile(r'(\d+(?:\.\d+)?)\s*(min|sec)', re.IGNORECASE)
IMPLICIT_SECONDS_PATTERN = re.compile(r'^(\d+)\s+(push|all out|ao|base|walk|wr)', re.IGNORECASE)


def parse_duration(line: str) -> Optional[int]:
    """
    Convert a treadmill line into a duration in seconds.

    Returns:
        Seconds, or None when the line carries no time token.
    """
    colon_match = COLON_TIME_PATTERN.search(line)
    if colon_match:
        return int(colon_match.group(1)) * 60 + int(colon_match.group(2))

    unit_match = UNIT_TIME_PATTERN.search(line)
    if unit_match:
        value = float(unit_match.group(1))
        if unit_match.group(2).lower() == "min":
            return math.floor(value * 60)
        return math.floor(value)

    implicit_match = IMPLICIT_SECONDS_PATTERN.match(line)
    if implicit_match:
        return int(implicit_match.group(1))

    return None
