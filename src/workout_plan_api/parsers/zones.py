"""
Zone classification for treadmill intervals.

Rules are evaluated top to bottom and the first hit wins, so transition
phrases ("base to push") must stay ahead of the single words they contain.
"""

import re
from typing import Callable, List, Tuple

# (label, color) pairs; colors are display classes passed through to the UI
BASE_TO_PUSH = ("Base to Push", "bg-gradient-to-r from-green-500 to-orange-500")
PUSH_TO_ALL_OUT = ("Push to All Out", "bg-gradient-to-r from-orange-500 to-red-600")
BASE_TO_ALL_OUT = ("Base to All Out", "bg-gradient-to-r from-green-500 to-red-600")
ALL_OUT = ("All Out", "bg-red-600")
PUSH_PACE = ("Push Pace", "bg-orange-500")
BASE_PACE = ("Base Pace", "bg-green-500")
WALKING_RECOVERY = ("Walking Recovery", "bg-zinc-600 border border-zinc-500")
SPRINT = ("Sprint", "bg-red-600")
EFFORT_INSTRUCTION = ("Instruction", "bg-orange-500")
RECOVERY = ("Recovery", "bg-blue-900/40 text-blue-200")
INSTRUCTION = ("Instruction", "bg-zinc-800")

CARD_COLOR = INSTRUCTION[1]

AO_TOKEN = re.compile(r'\bao\b')
WR_TOKEN = re.compile(r'\bwr\b')

EFFORT_WORDS = ("surge", "climb", "uphill", "increase", "sprint")
STEADY_WORDS = ("jog", "tread", "steady", "warm")
RECOVERY_WORDS = ("recover", "rest", "walk")


def _effort_zone(lower: str) -> Tuple[str, str]:
    return SPRINT if "sprint" in lower else EFFORT_INSTRUCTION


ZoneRule = Tuple[Callable[[str], bool], Callable[[str], Tuple[str, str]]]

ZONE_RULES: List[ZoneRule] = [
    (lambda s: "base to push" in s, lambda s: BASE_TO_PUSH),
    (lambda s: "push to all out" in s or "push to ao" in s, lambda s: PUSH_TO_ALL_OUT),
    (lambda s: "base to all out" in s or "base to ao" in s, lambda s: BASE_TO_ALL_OUT),
    (lambda s: "all out" in s or bool(AO_TOKEN.search(s)), lambda s: ALL_OUT),
    (lambda s: "push" in s, lambda s: PUSH_PACE),
    (lambda s: "base" in s, lambda s: BASE_PACE),
    (lambda s: "walking recovery" in s or bool(WR_TOKEN.search(s)), lambda s: WALKING_RECOVERY),
    (lambda s: any(w in s for w in EFFORT_WORDS), _effort_zone),
    (lambda s: any(w in s for w in STEADY_WORDS), lambda s: BASE_PACE),
    (lambda s: any(w in s for w in RECOVERY_WORDS), lambda s: RECOVERY),
]


def classify_zone(text: str) -> Tuple[str, str]:
    """Return (zone label, color tag) for a line of treadmill text."""
    lower = text.lower()
    for matches, zone in ZONE_RULES:
        if matches(lower):
            return zone(lower)
    return INSTRUCTION
