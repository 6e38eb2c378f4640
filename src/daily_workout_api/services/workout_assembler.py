"""
Workout Assembler

Builds a GeneratedWorkout from a daily template:
- One weighted draw per template category, in template order
- Categories missing from the catalog are skipped and reported
- Cardio resolved from the template's cardio kind
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, Sequence

from ..errors import EmptyCardioPoolError
from ..models import (
    CardioBranch,
    CardioKind,
    DailyTemplate,
    Diagnostic,
    DiagnosticKind,
    GeneratedWorkout,
    Metcon,
    PickedExercise,
    WeightedCatalog,
)
from .weighted_selector import select_exercise

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1), e.g. random.Random."""

    def random(self) -> float:
        ...


# Cardio kinds that are not data-driven
FIXED_CARDIO = {
    CardioKind.RUNNING: ("Running Session", "Cardio running workout"),
    CardioKind.MOBILITY: ("Mobility Session", "Flexibility and mobility work"),
    CardioKind.REST: ("Rest Day", "Recovery and rest"),
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutAssembler:
    """Assembles workouts using an injected randomness source."""

    def __init__(self, rng: RandomSource, clock: Optional[Callable[[], datetime]] = None):
        self.rng = rng
        self.clock = clock or _utc_now

    def assemble(
        self,
        template: DailyTemplate,
        catalog: WeightedCatalog,
        cardio_pool: Sequence[Metcon],
    ) -> GeneratedWorkout:
        """
        Generate a workout for template.

        Args:
            template: Resolved daily template
            catalog: Immutable weighted catalog
            cardio_pool: Metcons to sample from on metcon days

        Returns:
            GeneratedWorkout with one picked exercise per category found

        Raises:
            EmptyCardioPoolError: If the template needs a metcon and the pool is empty
        """
        picked: List[PickedExercise] = []
        diagnostics: List[Diagnostic] = []

        for category_name in template.category_names:
            category = catalog.find(category_name)
            if category is None:
                logger.warning(f'Category "{category_name}" not found in exercise catalog')
                diagnostics.append(Diagnostic(
                    kind=DiagnosticKind.MISSING_CATEGORY,
                    message=f'Category "{category_name}" not found in exercise catalog',
                    category=category_name,
                ))
                continue

            selection = select_exercise(category, self.rng.random())
            picked.append(PickedExercise(
                category_name=category_name,
                exercise_name=selection.entry.name,
                draw_percentage=selection.draw_percentage,
            ))

        cardio = self.resolve_cardio(template.cardio_kind, cardio_pool)

        return GeneratedWorkout(
            day_key=template.day_key,
            display_name=template.display_name,
            warmup_text=template.warmup_text,
            picked_exercises=tuple(picked),
            cardio=cardio,
            generated_at=self.clock(),
            diagnostics=tuple(diagnostics),
        )

    def resolve_cardio(self, kind: CardioKind, cardio_pool: Sequence[Metcon]) -> CardioBranch:
        """Pick the cardio branch; metcons are drawn uniformly from the pool."""
        kind = CardioKind(kind)
        if kind == CardioKind.METCON:
            if not cardio_pool:
                raise EmptyCardioPoolError("Metcon requested but no metcons are configured")
            index = min(int(self.rng.random() * len(cardio_pool)), len(cardio_pool) - 1)
            metcon = cardio_pool[index]
            return CardioBranch(kind=kind, name=metcon.name, description=metcon.description)

        name, description = FIXED_CARDIO[kind]
        return CardioBranch(kind=kind, name=name, description=description)
