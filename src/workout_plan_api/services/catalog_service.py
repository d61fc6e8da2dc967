"""
Exercise Catalog Service

PURPOSE
-------
- Load the exercise catalog (id, name, category, xp_factor) from a JSON file
- Keep the parsed catalog in memory until the file changes
- Expose a single function: `load_catalog()`

USAGE
-----
1. Import: `from workout_plan_api.services.catalog_service import load_catalog`
2. Call: `catalog = load_catalog()`
3. The file location comes from `settings.CATALOG_PATH` unless a path is passed.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from workout_plan_api.config import settings
from workout_plan_api.parsers.models import CatalogEntry

logger = logging.getLogger(__name__)

# ------------------------
# CONFIG
# ------------------------

# xp_factor given to records that do not set one when the file is ingested
DEFAULT_INGEST_XP_FACTOR = 1.0

# (path, mtime) -> catalog
_CACHE: Dict[Tuple[str, float], List[CatalogEntry]] = {}


class CatalogServiceError(RuntimeError):
    """Raised when the catalog file cannot be read or validated."""


# ------------------------
# PUBLIC ENTRYPOINT
# ------------------------

def load_catalog(path: Optional[Path] = None) -> List[CatalogEntry]:
    """
    Load the exercise catalog.

    - Reads a JSON array of catalog records
    - Extra keys ('type', 'standards', 'unit', ...) are ignored
    - Re-reads the file only when its modification time changes

    Raises:
        CatalogServiceError: If the file is missing or is not a valid catalog.
    """
    path = Path(path or settings.CATALOG_PATH)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise CatalogServiceError(f"Catalog file not found at {path}") from e

    key = (str(path), mtime)
    if key in _CACHE:
        return _CACHE[key]

    records = _read_records(path)
    try:
        catalog = [_normalize_record(record) for record in records]
    except (ValidationError, KeyError, TypeError, AttributeError) as e:
        raise CatalogServiceError(f"Invalid catalog record in {path}: {e}") from e

    logger.info(f"Loaded {len(catalog)} catalog entries from {path}")
    _CACHE.clear()
    _CACHE[key] = catalog
    return catalog


def clear_cache():
    """Forget any loaded catalog."""
    _CACHE.clear()


# ------------------------
# HELPERS
# ------------------------

def _read_records(path: Path) -> List[Dict[str, Any]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogServiceError(f"Could not read catalog {path}: {e}") from e

    if not isinstance(data, list):
        raise CatalogServiceError(f"Catalog {path} must be a JSON array")
    return data


def _normalize_record(record: Dict[str, Any]) -> CatalogEntry:
    """Transform a raw catalog record into a CatalogEntry."""
    return CatalogEntry(
        id=str(record.get("id", "")),
        name=record["name"],
        category=record.get("category"),
        xp_factor=record.get("xp_factor") or DEFAULT_INGEST_XP_FACTOR,
    )
