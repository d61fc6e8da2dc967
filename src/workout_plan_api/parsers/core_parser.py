"""Core/abs sections: strength grammar, relabeled as "Core Work"."""

from typing import List, Sequence

from .models import CatalogEntry
from .strength_parser import StrengthParser, StrengthBlock

CORE_PARSE_SECTION = "Abdominal Protocol"
CORE_SECTION = "Core Work"


class CoreParser(StrengthParser):
    """Parser for [CORE] sections"""

    default_section = CORE_PARSE_SECTION

    def parse(self, text: str, section_name: str = None) -> List[StrengthBlock]:
        blocks = super().parse(text, section_name)
        for block in blocks:
            block.section = CORE_SECTION
        return blocks


def parse_core_section(text: str, catalog: Sequence[CatalogEntry] = ()) -> List[StrengthBlock]:
    """Parse core text; every block ends up in the "Core Work" section"""
    return CoreParser(catalog).parse(text, CORE_PARSE_SECTION)
