"""In-process cache for extracted catalogs, keyed on the workbook version."""
import logging
import os
import threading
from pathlib import Path
from typing import Callable, Hashable, Optional, Tuple, Union

from ..models import ExtractionResult

logger = logging.getLogger(__name__)

WorkbookVersion = Tuple[str, int, int]


def workbook_version(path: Union[str, Path]) -> WorkbookVersion:
    """(resolved path, size, mtime_ns); changes whenever the file is replaced or edited."""
    stat = os.stat(path)
    return (str(Path(path).resolve()), stat.st_size, stat.st_mtime_ns)


class CatalogCache:
    """Holds the extraction result for the most recent workbook version."""

    def __init__(self):
        self._version: Optional[Hashable] = None
        self._result: Optional[ExtractionResult] = None
        self._lock = threading.Lock()

    def get(self, version: Hashable) -> Optional[ExtractionResult]:
        with self._lock:
            if self._result is not None and self._version == version:
                return self._result
            return None

    def get_or_build(self, version: Hashable, builder: Callable[[], ExtractionResult]) -> ExtractionResult:
        """Return the cached result for version, building it on a miss."""
        with self._lock:
            if self._result is not None and self._version == version:
                logger.debug(f"Catalog cache HIT: {version}")
                return self._result

            logger.info(f"Catalog cache MISS: {version}")
            result = builder()
            self._version = version
            self._result = result
            return result

    def invalidate(self) -> None:
        with self._lock:
            self._version = None
            self._result = None
