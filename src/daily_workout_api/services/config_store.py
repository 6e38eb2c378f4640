"""Workout configuration storage (JSON file with an in-memory override)."""
import json
import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from ..errors import ConfigInvalidError, ConfigNotFoundError
from ..models import Metcon, WorkoutConfig

logger = logging.getLogger(__name__)

# Used when the configuration lists no metcons
DEFAULT_METCONS: List[Metcon] = [
    Metcon(
        name="Fran",
        description="21-15-9 For Time:\n• Thrusters (95/65 lbs)\n• Pull-Ups",
    ),
    Metcon(
        name="Annie",
        description="50-40-30-20-10 For Time:\n• Double-Unders\n• Sit-Ups",
    ),
    Metcon(
        name="Cindy",
        description="20 Min AMRAP:\n• 5 Pull-Ups\n• 10 Push-Ups\n• 15 Air Squats",
    ),
]


class ConfigStore:
    """
    Loads the configuration document from disk.

    Saved changes are kept in memory only and take precedence over the file
    until the process restarts.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._override: Optional[WorkoutConfig] = None
        self._lock = threading.Lock()

    def load(self) -> WorkoutConfig:
        """Return the saved override, or the configuration file's contents."""
        with self._lock:
            if self._override is not None:
                return self._override

        if not self.path.is_file():
            raise ConfigNotFoundError(f"{self.path.name} not found at {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return WorkoutConfig.model_validate(data)
        except json.JSONDecodeError as e:
            raise ConfigInvalidError(f"{self.path.name} is not valid JSON: {e}") from e
        except ValidationError as e:
            raise ConfigInvalidError(
                f"{self.path.name} failed validation with {e.error_count()} errors"
            ) from e

    def save(self, config: WorkoutConfig) -> None:
        """Keep config in memory; later load() calls return it."""
        with self._lock:
            self._override = config
        logger.info("Configuration saved to memory")

    def has_override(self) -> bool:
        with self._lock:
            return self._override is not None

    def clear_override(self) -> None:
        with self._lock:
            self._override = None


def metcon_pool(config: WorkoutConfig) -> List[Metcon]:
    """Configured metcons, or the built-in set when none are configured."""
    return list(config.metcons) if config.metcons else list(DEFAULT_METCONS)
