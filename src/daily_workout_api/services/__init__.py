"""Workout selection, assembly and supporting services."""
from .weighted_selector import Selection, select_exercise
from .template_resolver import (
    DAY_KEYS,
    current_day_index,
    day_index_from_name,
    resolve_template,
    templates_from_config,
)
from .workout_assembler import RandomSource, WorkoutAssembler

__all__ = [
    "Selection",
    "select_exercise",
    "DAY_KEYS",
    "current_day_index",
    "day_index_from_name",
    "resolve_template",
    "templates_from_config",
    "RandomSource",
    "WorkoutAssembler",
]
