"""
Base Parser

Abstract base class for the section parsers.
"""

import re
import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

from .models import WorkoutBlock

logger = logging.getLogger(__name__)


class BaseSectionParser(ABC):
    """Abstract base class for section parsers"""

    # Regex patterns shared by the sections
    REST_PATTERN = re.compile(r'Rest[:\s]+(?:is\s+)?(\d+)\s*sec', re.IGNORECASE)  # "Rest: 90 sec", "Rest is 60 sec"
    NOTE_PATTERN = re.compile(r'\((.*?)\)')  # "(incline 2%)"

    #: Section label used when the caller does not pass one
    default_section: str = ""

    def __init__(self):
        self.warnings: List[str] = []

    @abstractmethod
    def parse(self, text: str, section_name: str = None) -> List[WorkoutBlock]:
        """
        Parse one section's text into blocks.

        Args:
            text: Raw section text (tag already removed)
            section_name: Label stamped on every emitted block

        Returns:
            Blocks in source-line order
        """
        pass

    def iter_lines(self, text: str) -> Iterator[str]:
        """Yield trimmed content lines, skipping blanks, tags and separators"""
        for line in text.strip().split('\n'):
            line = line.strip()
            if not line or line.startswith('[') or line.startswith('---'):
                continue
            yield line

    def parse_rest_seconds(self, line: str) -> int:
        """Rest annotation in seconds, 0 when absent"""
        match = self.REST_PATTERN.search(line)
        return int(match.group(1)) if match else 0

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
