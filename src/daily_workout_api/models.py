"""
Workout Models

Pydantic models for the weighted exercise catalog, the daily templates and the
generated workouts built from them.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class CardioKind(str, Enum):
    """Non-strength component of a workout day"""
    METCON = "metcon"
    RUNNING = "running"
    MOBILITY = "mobility"
    REST = "rest"


class DiagnosticKind(str, Enum):
    """Non-fatal conditions recorded while extracting or assembling"""
    STRUCTURAL_PARSE_ANOMALY = "structural_parse_anomaly"  # Malformed header/entry cell
    MISSING_CATEGORY = "missing_category"                  # Template names an unknown category


class Diagnostic(BaseModel):
    """A recorded data-quality issue"""
    kind: DiagnosticKind
    message: str
    category: Optional[str] = None
    row: Optional[int] = Field(default=None, description="0-based grid row")
    column: Optional[int] = Field(default=None, description="0-based grid column")

    class Config:
        frozen = True


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class ExerciseEntry(BaseModel):
    """One weighted exercise inside a category"""
    name: str
    ratio: float = Field(default=0, ge=0, description="Share of the category in percentage points")
    cumulative_threshold: float = Field(
        default=0, ge=0, le=100,
        description="Upper bound of this exercise's selection range on a 0-100 scale",
    )

    class Config:
        frozen = True


class Category(BaseModel):
    """Named, weighted pool of exercises discovered in the grid"""
    name: str
    exercises: Tuple[ExerciseEntry, ...] = ()
    origin_column: int = 0
    origin_row: int = 0

    class Config:
        frozen = True

    @field_validator("exercises")
    @classmethod
    def thresholds_non_decreasing(cls, exercises: Tuple[ExerciseEntry, ...]) -> Tuple[ExerciseEntry, ...]:
        for previous, current in zip(exercises, exercises[1:]):
            if current.cumulative_threshold < previous.cumulative_threshold:
                raise ValueError(
                    f"threshold of '{current.name}' ({current.cumulative_threshold}) is below "
                    f"'{previous.name}' ({previous.cumulative_threshold})"
                )
        return exercises


class WeightedCatalog(BaseModel):
    """Categories in header discovery order"""
    categories: Tuple[Category, ...] = ()

    class Config:
        frozen = True

    @field_validator("categories")
    @classmethod
    def categories_have_exercises(cls, categories: Tuple[Category, ...]) -> Tuple[Category, ...]:
        for category in categories:
            if not category.exercises:
                raise ValueError(f"category '{category.name}' has no exercises")
        return categories

    def find(self, name: str) -> Optional[Category]:
        """Return the first category called name, or None."""
        return next((c for c in self.categories if c.name == name), None)

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.categories]

    def __len__(self) -> int:
        return len(self.categories)


class ExtractionResult(BaseModel):
    """Catalog plus the anomalies absorbed while building it"""
    catalog: WeightedCatalog = Field(default_factory=WeightedCatalog)
    diagnostics: Tuple[Diagnostic, ...] = ()

    class Config:
        frozen = True


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class DailyTemplate(BaseModel):
    """What to train on one day of the week"""
    day_index: int = Field(..., ge=0, le=6, description="0 = Sunday")
    day_key: str = Field(..., description="'sunday' .. 'saturday'")
    display_name: str = ""
    warmup_text: str = ""
    category_names: Tuple[str, ...] = ()
    cardio_kind: CardioKind = CardioKind.REST

    class Config:
        frozen = True

    @property
    def day_label(self) -> str:
        return self.day_key.capitalize()


class Metcon(BaseModel):
    """A conditioning workout from the metcon pool"""
    name: str
    description: str = ""


class CardioBranch(BaseModel):
    """Resolved cardio component of a generated workout"""
    kind: CardioKind
    name: str
    description: str

    class Config:
        frozen = True


# ---------------------------------------------------------------------------
# Generated workouts
# ---------------------------------------------------------------------------


class PickedExercise(BaseModel):
    """Exercise drawn from one template category"""
    category_name: str
    exercise_name: str
    draw_percentage: float = Field(..., ge=0, le=100)

    class Config:
        frozen = True


class GeneratedWorkout(BaseModel):
    """A workout assembled for a single day"""
    day_key: str
    display_name: str
    warmup_text: str
    picked_exercises: Tuple[PickedExercise, ...] = ()
    cardio: CardioBranch
    generated_at: datetime
    diagnostics: Tuple[Diagnostic, ...] = ()

    class Config:
        frozen = True


# ---------------------------------------------------------------------------
# Configuration document
# ---------------------------------------------------------------------------


class TemplateConfig(BaseModel):
    """Per-day template as stored in the configuration document"""
    name: str = ""
    warmup: str = ""
    categories: List[str] = Field(default_factory=list)
    cardio: CardioKind = CardioKind.REST

    class Config:
        use_enum_values = True


class ConfigSettings(BaseModel):
    """Display and data-source settings"""
    default_excel_file: str = Field(default="Workout_Catalog.xlsx", alias="defaultExcelFile")
    allow_custom_percentages: bool = Field(default=False, alias="allowCustomPercentages")
    show_probabilities: bool = Field(default=True, alias="showProbabilities")
    show_random_values: bool = Field(default=True, alias="showRandomValues")

    class Config:
        populate_by_name = True


class WorkoutConfig(BaseModel):
    """Complete configuration document edited by the admin tooling"""
    daily_templates: Dict[str, TemplateConfig] = Field(..., alias="dailyTemplates")
    settings: ConfigSettings
    metcons: List[Metcon]

    class Config:
        populate_by_name = True
