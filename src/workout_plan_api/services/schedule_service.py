"""
Weekly plan templates.

Each weekday has a plain-text plan at `<WORKOUT_TEMPLATES_DIR>/<day>.txt`
written in the bracket-tag format the section parsers understand.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence

from workout_plan_api.config import settings
from workout_plan_api.models import ScheduleEntry, WorkoutType
from workout_plan_api.parsers.dispatcher import process_workout_text
from workout_plan_api.parsers.models import CatalogEntry

logger = logging.getLogger(__name__)

DAY_ORDER = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}
UNKNOWN_DAY_ORDER = 99


class TemplateNotFoundError(RuntimeError):
    """Raised when no plan template exists for a day."""


def _weekday_name(d: date) -> str:
    return d.strftime("%A").lower()


def resolve_day(date_query: Optional[str] = None, today: Optional[date] = None) -> str:
    """
    Turn a ?date= query into a lowercase weekday name.

    "monday" -> "monday"; "2026-02-25" -> "wednesday"; missing or
    unparseable -> today's weekday.
    """
    today = today or date.today()
    if not date_query:
        return _weekday_name(today)

    if date_query.isalpha():
        return date_query.lower()

    try:
        return _weekday_name(datetime.strptime(f"{date_query}T12:00:00", "%Y-%m-%dT%H:%M:%S"))
    except ValueError:
        logger.warning(f"Unparseable date query {date_query!r}, using today")
        return _weekday_name(today)


def template_path(day: str, templates_dir: Optional[Path] = None) -> Path:
    return Path(templates_dir or settings.WORKOUT_TEMPLATES_DIR) / f"{day}.txt"


def load_template(day: str, templates_dir: Optional[Path] = None) -> str:
    """
    Read the plan text for a day.

    Raises:
        TemplateNotFoundError: If the template file does not exist.
    """
    path = template_path(day, templates_dir)
    if not path.is_file():
        raise TemplateNotFoundError(f"Template not found for {day} at {path}")
    return path.read_text(encoding="utf-8")


def template_title(content: str, day: str) -> str:
    """First line as title ('# ' stripped); tag lines fall back to the day name"""
    lines = content.split("\n")
    first_line = lines[0].strip() if lines else ""

    if first_line.startswith("#"):
        return first_line.replace("#", "", 1).strip()
    if first_line and not first_line.startswith("["):
        return first_line
    return day.capitalize()


def classify_workout_type(content: str) -> WorkoutType:
    upper = content.upper()
    has_tread = "TREADMILL" in upper or "ENGINE" in upper
    has_strength = "STRENGTH" in upper or "ARMOR" in upper

    if has_tread and not has_strength:
        return "Cardio"
    if has_tread and has_strength:
        return "Hybrid"
    if "RECOVERY" in upper:
        return "Recovery"
    return "Strength"


def build_schedule(
    catalog: Sequence[CatalogEntry],
    templates_dir: Optional[Path] = None,
) -> List[ScheduleEntry]:
    """Summarize every template in the directory, Monday first"""
    directory = Path(templates_dir or settings.WORKOUT_TEMPLATES_DIR)
    if not directory.is_dir():
        logger.warning(f"Templates directory {directory} does not exist")
        return []

    schedule = []
    for path in sorted(directory.glob("*.txt")):
        day = path.stem.lower()
        entry = ScheduleEntry(
            day=day,
            title=day.capitalize(),
            order=DAY_ORDER.get(day, UNKNOWN_DAY_ORDER),
        )

        try:
            content = path.read_text(encoding="utf-8")
            entry.title = template_title(content, day)
            entry.xp = sum(block.xp_value for block in process_workout_text(content, catalog))
            entry.type = classify_workout_type(content)
        except Exception as e:
            logger.error(f"Error parsing schedule {path.name}: {e}")

        schedule.append(entry)

    schedule.sort(key=lambda e: e.order)
    return schedule
