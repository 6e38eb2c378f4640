"""Weighted random selection over a category's cumulative thresholds."""
from dataclasses import dataclass

from ..errors import EmptyCategoryError
from ..models import Category, ExerciseEntry


@dataclass(frozen=True)
class Selection:
    """Chosen entry plus the draw that chose it, on a 0-100 scale."""
    entry: ExerciseEntry
    draw_percentage: float


def select_exercise(category: Category, draw: float) -> Selection:
    """
    Pick the exercise whose range contains draw.

    Entry i covers [threshold(i-1), threshold(i)] with threshold(-1) = 0; both
    ends are inclusive and the earliest matching range wins. When no range
    matches (thresholds that stop short of 100) the last exercise is used.

    Args:
        category: Category with at least one exercise
        draw: Random sample in [0, 1)

    Raises:
        EmptyCategoryError: If the category has no exercises
        ValueError: If draw is outside [0, 1)
    """
    if not category.exercises:
        raise EmptyCategoryError(f"No exercises found in category: {category.name}")
    if not 0 <= draw < 1:
        raise ValueError(f"draw must be in [0, 1), got {draw}")

    draw_percentage = draw * 100
    lower_bound = 0.0
    for entry in category.exercises:
        if lower_bound <= draw_percentage <= entry.cumulative_threshold:
            return Selection(entry=entry, draw_percentage=draw_percentage)
        lower_bound = entry.cumulative_threshold

    return Selection(entry=category.exercises[-1], draw_percentage=draw_percentage)
