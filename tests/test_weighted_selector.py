"""Unit tests for weighted exercise selection."""
import pytest
from daily_workout_api.errors import EmptyCategoryError
from daily_workout_api.models import Category, ExerciseEntry
from daily_workout_api.services.weighted_selector import select_exercise


def make_category(*pairs, name="Squats"):
    return Category(
        name=name,
        exercises=tuple(
            ExerciseEntry(name=n, ratio=0, cumulative_threshold=t) for n, t in pairs
        ),
    )


@pytest.fixture
def squats():
    return make_category(("Back Squat", 40), ("Front Squat", 70), ("Overhead Squat", 100))


class TestSelectExercise:
    """Test cases for cumulative-threshold selection."""

    @pytest.mark.parametrize("draw,expected", [
        (0.0, "Back Squat"),
        (0.5, "Front Squat"),
        (0.999, "Overhead Squat"),
        (0.2, "Back Squat"),
        (0.71, "Overhead Squat"),
    ])
    def test_squats_scenario(self, squats, draw, expected):
        assert select_exercise(squats, draw).entry.name == expected

    def test_draw_percentage_is_scaled(self, squats):
        selection = select_exercise(squats, 0.25)
        assert selection.draw_percentage == pytest.approx(25.0)

    def test_boundary_selects_earlier_entry(self):
        """A draw exactly on a threshold belongs to the range it closes."""
        press = make_category(("Bench Press", 25), ("Overhead Press", 50), ("Push Press", 100))

        assert select_exercise(press, 0.25).entry.name == "Bench Press"
        assert select_exercise(press, 0.5).entry.name == "Overhead Press"
        assert select_exercise(press, 0.5).draw_percentage == 50

    def test_fallback_to_last_entry(self):
        short = make_category(("Plank", 30), ("Hollow Hold", 60))
        selection = select_exercise(short, 0.9999)

        assert selection.entry.name == "Hollow Hold"
        assert selection.draw_percentage == pytest.approx(99.99)

    def test_zero_thresholds_fall_back(self):
        """Rows whose help column was unreadable (0) still produce a pick."""
        broken = make_category(("Plank", 0), ("Hollow Hold", 0))

        assert select_exercise(broken, 0.0).entry.name == "Plank"
        assert select_exercise(broken, 0.5).entry.name == "Hollow Hold"

    def test_single_entry_always_selected(self):
        only = make_category(("Pull-Up", 100))
        for draw in (0.0, 0.33, 0.999999):
            assert select_exercise(only, draw).entry.name == "Pull-Up"

    def test_total_over_draw_grid(self, squats):
        for i in range(1000):
            assert select_exercise(squats, i / 1000).entry in squats.exercises

    def test_empty_category_raises(self):
        with pytest.raises(EmptyCategoryError, match="Squats"):
            select_exercise(Category(name="Squats"), 0.5)

    @pytest.mark.parametrize("draw", [-0.1, 1.0, 1.5])
    def test_draw_out_of_range_raises(self, squats, draw):
        with pytest.raises(ValueError):
            select_exercise(squats, draw)
