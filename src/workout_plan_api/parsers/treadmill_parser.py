"""
Treadmill Parser

Splits an engine/treadmill section into "Tread Block" timers. Lines with a
time token become intervals classified by pace zone; everything else is
kept as an instruction card. XP is worked out after the scan from interval
durations and zone rates.
"""

import logging
from typing import List, Optional

from .base import BaseSectionParser
from .models import TimerBlock, IntervalItem, CardItem
from .time_tokens import parse_duration
from .zones import classify_zone, CARD_COLOR
from workout_plan_api.utils import floor_xp

logger = logging.getLogger(__name__)

BLOCK_HEADER_MARKERS = ("Tread Block", "Warm-up")
DEFAULT_BLOCK_NAME = "Treadmill Warmup"

# XP per second of work, first match on the zone label wins
ZONE_XP_RATES = (
    ("ALL OUT", 0.4),
    ("PUSH", 0.2),
    ("WALKING", 0.05),
)
DEFAULT_XP_RATE = 0.1


def interval_xp_rate(zone: str) -> float:
    """XP rate for a zone label"""
    zone = (zone or "").upper()
    for marker, rate in ZONE_XP_RATES:
        if marker in zone:
            return rate
    return DEFAULT_XP_RATE


def timer_block_xp(block: TimerBlock) -> int:
    """Sum of floor(seconds * rate) over the block's intervals; cards score nothing"""
    return sum(
        floor_xp(item.seconds * interval_xp_rate(item.zone))
        for item in block.intervals
        if isinstance(item, IntervalItem)
    )


class TreadmillParser(BaseSectionParser):
    """Parser for [TREADMILL] / [ENGINE] sections"""

    default_section = "Engine"

    def parse(self, text: str, section_name: str = None) -> List[TimerBlock]:
        section = section_name or self.default_section
        blocks: List[TimerBlock] = []
        current: Optional[TimerBlock] = None

        for line in self.iter_lines(text):
            if any(marker in line for marker in BLOCK_HEADER_MARKERS):
                if current:
                    blocks.append(current)
                current = TimerBlock(name=line, section=section)
                continue

            if current is None:
                # Text before the first header
                current = TimerBlock(name=DEFAULT_BLOCK_NAME, section=section)

            current.intervals.append(self._parse_item(line))

        if current:
            blocks.append(current)

        for block in blocks:
            block.xp_value = timer_block_xp(block)

        if text.strip() and not blocks:
            self.add_warning(f"No treadmill blocks found in {section} section")

        logger.debug(f"Parsed {len(blocks)} treadmill block(s) for {section}")
        return blocks

    def _parse_item(self, line: str):
        seconds = parse_duration(line)
        if seconds is None:
            return CardItem(text=line, color=CARD_COLOR)

        note_match = self.NOTE_PATTERN.search(line)
        zone, color = classify_zone(line)
        return IntervalItem(
            seconds=seconds,
            zone=zone,
            color=color,
            note=note_match.group(1) if note_match else None,
            raw_text=line,
        )


def parse_treadmill_section(text: str, section_name: str = "Engine") -> List[TimerBlock]:
    """Parse treadmill text into timer blocks"""
    return TreadmillParser().parse(text, section_name)
