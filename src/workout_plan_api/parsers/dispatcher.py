"""
Section dispatcher

Splits a plan on its bracket tags and runs the section parsers as a fixed
pipeline: Engine, then Armor, then Core. Output order follows the pipeline,
not the order tags appear in the text.

    [TREADMILL] / [ENGINE]  -> TreadmillParser  (section "Engine")
    [STRENGTH]  / [ARMOR]   -> StrengthParser   (section "Armor")
    [CORE]                  -> CoreParser       (section "Core Work")
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence, Tuple

from .base import BaseSectionParser
from .core_parser import CoreParser
from .models import CatalogEntry, WorkoutBlock
from .strength_parser import StrengthParser
from .treadmill_parser import TreadmillParser

logger = logging.getLogger(__name__)

SECTION_TAG_PATTERN = re.compile(r'\[(TREADMILL|STRENGTH|CORE|ARMOR|ENGINE)\]', re.IGNORECASE)

TREADMILL = "treadmill"
STRENGTH = "strength"
CORE = "core"

TAG_BUFFERS: Dict[str, str] = {
    "TREADMILL": TREADMILL,
    "ENGINE": TREADMILL,
    "STRENGTH": STRENGTH,
    "ARMOR": STRENGTH,
    "CORE": CORE,
}

# (buffer, section name, parser factory) in processing order
PIPELINE: Tuple[Tuple[str, str, Callable[[Sequence[CatalogEntry]], BaseSectionParser]], ...] = (
    (TREADMILL, "Engine", lambda catalog: TreadmillParser()),
    (STRENGTH, "Armor", lambda catalog: StrengthParser(catalog)),
    (CORE, "Abdominal Protocol", lambda catalog: CoreParser(catalog)),
)


@dataclass
class DispatchResult:
    """Blocks from every stage plus the warnings the parsers raised"""
    blocks: List[WorkoutBlock] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def total_xp(self) -> int:
        return sum(block.xp_value for block in self.blocks)


def coerce_catalog(catalog: Sequence) -> List[CatalogEntry]:
    """Accept CatalogEntry models or plain dict records"""
    return [
        entry if isinstance(entry, CatalogEntry) else CatalogEntry.model_validate(entry)
        for entry in catalog or ()
    ]


def split_sections(text: str) -> Dict[str, str]:
    """Concatenate each tag's content into its buffer; untagged text is dropped"""
    buffers = {TREADMILL: "", STRENGTH: "", CORE: ""}
    parts = SECTION_TAG_PATTERN.split(text)

    # parts = [preamble, tag, content, tag, content, ...]
    for i in range(1, len(parts), 2):
        buffers[TAG_BUFFERS[parts[i].upper()]] += parts[i + 1]

    return buffers


def dispatch_workout_text(text: str, catalog: Sequence[CatalogEntry]) -> DispatchResult:
    """Run the Engine -> Armor -> Core pipeline over a tagged plan"""
    result = DispatchResult()
    catalog = coerce_catalog(catalog)
    buffers = split_sections(text or "")

    for buffer, section_name, make_parser in PIPELINE:
        section_text = buffers[buffer]
        if not section_text:
            continue
        parser = make_parser(catalog)
        result.blocks.extend(parser.parse(section_text, section_name))
        result.warnings.extend(parser.warnings)

    logger.debug(f"Dispatched plan into {len(result.blocks)} block(s)")
    return result


def process_workout_text(text: str, catalog: Sequence[CatalogEntry]) -> List[WorkoutBlock]:
    """Parse a tagged workout plan into an ordered list of blocks"""
    return dispatch_workout_text(text, catalog).blocks
