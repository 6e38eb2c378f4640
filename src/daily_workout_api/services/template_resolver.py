"""Daily template lookup and day-of-week helpers."""
from datetime import date
from typing import List, Optional, Sequence

from ..errors import TemplateNotFoundError
from ..models import CardioKind, DailyTemplate, WorkoutConfig

# Sunday-first, matching the configuration document keys
DAY_KEYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


def templates_from_config(config: WorkoutConfig) -> List[DailyTemplate]:
    """Convert configured templates to DailyTemplates in week order; unconfigured days are skipped."""
    templates = []
    for index, day_key in enumerate(DAY_KEYS):
        configured = config.daily_templates.get(day_key)
        if configured is None:
            continue
        templates.append(DailyTemplate(
            day_index=index,
            day_key=day_key,
            display_name=configured.name,
            warmup_text=configured.warmup,
            category_names=tuple(configured.categories),
            cardio_kind=CardioKind(configured.cardio),
        ))
    return templates


def resolve_template(day_index: int, templates: Sequence[DailyTemplate]) -> DailyTemplate:
    """Return the template for day_index (0 = Sunday)."""
    for template in templates:
        if template.day_index == day_index:
            return template
    raise TemplateNotFoundError(f"No template found for day index: {day_index}")


def day_index_from_name(name: Optional[str], default: int) -> int:
    """'Monday' -> 1; unknown or missing names give default."""
    if not name:
        return default
    key = name.strip().lower()
    return DAY_KEYS.index(key) if key in DAY_KEYS else default


def current_day_index(today: Optional[date] = None) -> int:
    """Day index of today with Sunday = 0."""
    today = today or date.today()
    return (today.weekday() + 1) % 7
