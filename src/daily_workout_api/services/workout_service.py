"""
Workout Service

Glue between the configuration store, the workbook, the catalog cache and the
assembler. Templates are re-read from configuration on every call; the
catalog is rebuilt only when the workbook changes.
"""

import logging
import random
from datetime import date
from pathlib import Path
from typing import List, Optional

from ..errors import CatalogUnavailableError
from ..models import DailyTemplate, ExtractionResult, GeneratedWorkout, WeightedCatalog
from ..parsers.category_extractor import CategoryExtractor
from ..parsers.workbook_reader import DEFAULT_SHEET, locate_workbook, read_grid_from_path
from .catalog_cache import CatalogCache, workbook_version
from .config_store import ConfigStore, metcon_pool
from .template_resolver import (
    current_day_index,
    day_index_from_name,
    resolve_template,
    templates_from_config,
)
from .workout_assembler import RandomSource, WorkoutAssembler

logger = logging.getLogger(__name__)


class WorkoutService:
    """Generates daily workouts from the configured workbook and templates."""

    def __init__(
        self,
        config_store: ConfigStore,
        cache: Optional[CatalogCache] = None,
        rng: Optional[RandomSource] = None,
        workbook_path: Optional[str] = None,
        sheet_name: str = DEFAULT_SHEET,
        extractor: Optional[CategoryExtractor] = None,
    ):
        self.config_store = config_store
        self.cache = cache or CatalogCache()
        self.assembler = WorkoutAssembler(rng or random.Random())
        self.workbook_path = workbook_path
        self.sheet_name = sheet_name
        self.extractor = extractor or CategoryExtractor()

    def locate_workbook(self) -> Path:
        config = self.config_store.load()
        return locate_workbook(config.settings.default_excel_file, self.workbook_path)

    def extraction(self) -> ExtractionResult:
        """Catalog and diagnostics for the current workbook, cached per version."""
        path = self.locate_workbook()
        version = (workbook_version(path), self.sheet_name)
        return self.cache.get_or_build(
            version,
            lambda: self.extractor.parse(read_grid_from_path(path, self.sheet_name)),
        )

    def catalog(self) -> WeightedCatalog:
        """Current catalog; an empty one is treated as unavailable."""
        catalog = self.extraction().catalog
        if not catalog.categories:
            raise CatalogUnavailableError(
                f"No exercise categories found in sheet '{self.sheet_name}'"
            )
        return catalog

    def templates(self) -> List[DailyTemplate]:
        return templates_from_config(self.config_store.load())

    def generate(
        self,
        day: Optional[str] = None,
        today: Optional[date] = None,
        catalog: Optional[WeightedCatalog] = None,
    ) -> GeneratedWorkout:
        """
        Generate a workout for the named day, or today when day is missing or unknown.

        Draws from catalog when given, otherwise from the current catalog.

        Raises:
            ConfigInvalidError: If the configuration file cannot be parsed
            TemplateNotFoundError: If the day has no template
            CatalogUnavailableError: If the workbook yields no categories
            EmptyCardioPoolError: If a metcon is needed and none are available
        """
        config = self.config_store.load()
        day_index = day_index_from_name(day, current_day_index(today))
        template = resolve_template(day_index, templates_from_config(config))
        if catalog is None:
            catalog = self.catalog()

        workout = self.assembler.assemble(template, catalog, metcon_pool(config))
        logger.info(
            f"Generated {template.day_key} workout with {len(workout.picked_exercises)} exercises "
            f"and {workout.cardio.kind.value} cardio"
        )
        return workout
