"""
Test fixtures for workout-plan-api.

Provides a sample catalog, plan text and on-disk templates/catalog files
so API tests run against temporary data instead of the repo's data/.
"""

import json
import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_plan_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_plan_api.main import app
from workout_plan_api.config import settings
from workout_plan_api.parsers.models import CatalogEntry
from workout_plan_api.services import catalog_service


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


CATALOG_RECORDS = [
    {"id": "back_squat", "name": "Back Squat", "category": "legs", "xp_factor": 3},
    {"id": "deadlift", "name": "Deadlift", "category": "posterior", "xp_factor": 2},
    {"id": "bench_press", "name": "Bench Press", "category": "push", "xp_factor": 2},
    {"id": "hanging_leg_raise", "name": "Hanging Leg Raise", "category": "core", "xp_factor": 2},
    {"id": "plank", "name": "Plank", "category": "core"},
]


@pytest.fixture
def catalog_records() -> List[dict]:
    """Catalog as plain dict records (API/JSON shape)."""
    return [dict(r) for r in CATALOG_RECORDS]


@pytest.fixture
def catalog() -> List[CatalogEntry]:
    """Catalog as CatalogEntry models."""
    return [CatalogEntry(**r) for r in CATALOG_RECORDS]


@pytest.fixture
def sample_plan_text() -> str:
    """Plan with core first in the text; output order is still Engine, Armor, Core."""
    return """Plan for the day

[CORE]
1. Hanging Leg Raise: 3 sets x 12 reps

[TREADMILL]
Tread Block 1
1:00 All Out
0:30 Push (incline 2%)

[STRENGTH]
1. Back Squat: 5 sets x 5 reps Rest: 90 sec
2. Deadlift: 3 sets x 5,3,1 reps
"""


# ---------------------------------------------------------------------------
# On-disk data
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_catalog_cache():
    """Each test reads catalog files fresh."""
    catalog_service.clear_cache()
    yield
    catalog_service.clear_cache()


@pytest.fixture
def catalog_file(tmp_path, monkeypatch) -> Path:
    """Catalog JSON file wired into settings.CATALOG_PATH."""
    path = tmp_path / "activity_catalog.json"
    path.write_text(json.dumps(CATALOG_RECORDS), encoding="utf-8")
    monkeypatch.setattr(settings, "CATALOG_PATH", path)
    return path


@pytest.fixture
def templates_dir(tmp_path, monkeypatch) -> Path:
    """Weekly templates directory wired into settings.WORKOUT_TEMPLATES_DIR."""
    directory = tmp_path / "weekly"
    directory.mkdir()

    (directory / "monday.txt").write_text(
        "# Iron Monday\n\n[STRENGTH]\n1. Back Squat: 5 sets x 5 reps Rest: 90 sec\n",
        encoding="utf-8",
    )
    (directory / "tuesday.txt").write_text(
        "[TREADMILL]\nTread Block 1\n1:00 All Out\n",
        encoding="utf-8",
    )
    (directory / "wednesday.txt").write_text(
        "Hybrid Wednesday\n[ENGINE]\nTread Block 1\n0:30 Push\n[ARMOR]\n1. Deadlift: 3 sets x 5,3,1 reps\n",
        encoding="utf-8",
    )

    monkeypatch.setattr(settings, "WORKOUT_TEMPLATES_DIR", directory)
    return directory
