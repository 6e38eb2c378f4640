"""
Test fixtures for daily-workout-api.

Provides sample grids, configuration documents, real .xlsx workbooks and a
scripted randomness source for deterministic workout generation.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

# Repo root: .../daily-workout-api
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import daily_workout_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from daily_workout_api.main import app
from daily_workout_api.api.routes import get_workout_service
from daily_workout_api.services.catalog_cache import CatalogCache
from daily_workout_api.services.config_store import ConfigStore
from daily_workout_api.services.workout_service import WorkoutService


# ---------------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------------


class ScriptedRandom:
    """Returns prescribed draws in order, cycling when exhausted."""

    def __init__(self, draws: Sequence[float]):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


# ---------------------------------------------------------------------------
# Sample grids
# ---------------------------------------------------------------------------


@pytest.fixture
def squats_grid() -> List[List[Any]]:
    """Single colon-terminated category in column 0."""
    return [
        ["Squats:", "Ratio", "Help Column"],
        ["Back Squat", 40, 40],
        ["Front Squat", 30, 70],
        ["Overhead Squat", 30, 100],
    ]


@pytest.fixture
def catalog_grid() -> List[List[Any]]:
    """Several categories laid out side by side and stacked, as in a hand-made sheet."""
    return [
        ["Exercise Catalog"],
        [],
        ["Squats:", "Ratio", "Help Column", None, "Press", "Ratio", "Help Column"],
        ["Back Squat", 40, 40, None, "Bench Press", 50, 50],
        ["Front Squat", 30, 70, None, "Overhead Press", 30, 80],
        ["Goblet Squat", 30, 100, None, "Push Press", 20, 100],
        [None, None, None, None, None],
        ["Pull:", "Ratio:", "Help Column:", None, "Core:"],
        ["Pull-Up", 60, 60, None, "Plank", 50, 50],
        ["Barbell Row", 40, 100, None, "Hollow Hold", 50, 100],
    ]


@pytest.fixture
def catalog_rows() -> List[List[Any]]:
    """Rows written to the sample workbook."""
    return [
        ["Squats:", "Ratio", "Help Column", None, "Press:", "Ratio", "Help Column"],
        ["Back Squat", 40, 40, None, "Bench Press", 50, 50],
        ["Front Squat", 30, 70, None, "Overhead Press", 50, 100],
        ["Overhead Squat", 30, 100],
        [],
        ["Pull:", "Ratio", "Help Column"],
        ["Pull-Up", 100, 100],
    ]


def _write_workbook(path: Path, rows: List[List[Any]], sheet_name: str = "Exercises") -> Path:
    """Save rows to a real .xlsx file."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


@pytest.fixture
def write_workbook():
    """Helper that writes rows to an .xlsx file and returns its path."""
    return _write_workbook


@pytest.fixture
def workbook_path(tmp_path, catalog_rows) -> Path:
    """Sample exercise workbook on disk."""
    return _write_workbook(tmp_path / "Workout_Catalog.xlsx", catalog_rows)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_config_dict() -> Dict[str, Any]:
    """Configuration document in the camelCase layout the admin tooling writes."""
    templates = {
        day: {"name": f"{day.capitalize()} Session", "warmup": "5 min row", "categories": [], "cardio": "rest"}
        for day in ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
    }
    templates["monday"] = {
        "name": "Lower Body",
        "warmup": "5 min bike",
        "categories": ["Squats", "Pull"],
        "cardio": "metcon",
    }
    templates["tuesday"] = {
        "name": "Upper Body",
        "warmup": "Band pull-aparts",
        "categories": ["Press", "Lunges"],
        "cardio": "running",
    }
    return {
        "dailyTemplates": templates,
        "settings": {
            "defaultExcelFile": "Workout_Catalog.xlsx",
            "allowCustomPercentages": False,
            "showProbabilities": True,
            "showRandomValues": True,
        },
        "metcons": [
            {"name": "Fran", "description": "21-15-9 For Time"},
            {"name": "Grace", "description": "30 Clean and Jerks For Time"},
        ],
    }


@pytest.fixture
def config_path(tmp_path, sample_config_dict) -> Path:
    path = tmp_path / "workout_config.json"
    path.write_text(json.dumps(sample_config_dict), encoding="utf-8")
    return path


@pytest.fixture
def workout_service(config_path, workbook_path, scripted_random) -> WorkoutService:
    """Service wired to temp files and a fixed draw of 0.5."""
    return WorkoutService(
        config_store=ConfigStore(config_path),
        cache=CatalogCache(),
        rng=scripted_random([0.5]),
        workbook_path=str(workbook_path),
    )


# ---------------------------------------------------------------------------
# Test client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(workout_service) -> TestClient:
    """Per-test FastAPI TestClient using the temp-file service."""
    app.dependency_overrides[get_workout_service] = lambda: workout_service
    yield TestClient(app)
    app.dependency_overrides.clear()
