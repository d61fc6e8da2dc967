"""XP factor lookup against the exercise catalog."""

import re
import logging
from typing import Optional, Sequence

from .models import CatalogEntry

logger = logging.getLogger(__name__)

ORDINAL_PREFIX_PATTERN = re.compile(r'^\d+\.\s*')

# Minimum shared name tokens for a fuzzy hit
MIN_TOKEN_OVERLAP = 2

# Used when nothing in the catalog is close enough
FALLBACK_XP_FACTOR = 0.5


def _factor(entry: CatalogEntry) -> float:
    return entry.xp_factor or 0


def clean_exercise_name(name: str) -> str:
    """Strip a leading "3. " ordinal and normalize case/whitespace"""
    return ORDINAL_PREFIX_PATTERN.sub('', name).lower().strip()


def resolve_xp_factor(exercise_name: str, catalog: Sequence[CatalogEntry]) -> float:
    """
    Look up the per-rep XP multiplier for an exercise.

    Exact (case-insensitive) name match first, then the catalog entry
    sharing the most whitespace tokens with the name. The best fuzzy
    candidate only counts when it shares at least MIN_TOKEN_OVERLAP
    tokens; otherwise FALLBACK_XP_FACTOR is returned. Ties keep the
    first entry in catalog order.
    """
    clean_name = clean_exercise_name(exercise_name)

    for entry in catalog:
        if entry.name.lower() == clean_name:
            return _factor(entry)

    query_tokens = set(clean_name.split())
    best_entry: Optional[CatalogEntry] = None
    best_score = 0

    for entry in catalog:
        score = len(query_tokens & set(entry.name.lower().split()))
        if score > best_score:
            best_score = score
            best_entry = entry

    if best_entry is not None and best_score >= MIN_TOKEN_OVERLAP:
        logger.debug(f"Fuzzy catalog match: {clean_name!r} -> {best_entry.name!r} ({best_score} tokens)")
        return _factor(best_entry)

    return FALLBACK_XP_FACTOR
