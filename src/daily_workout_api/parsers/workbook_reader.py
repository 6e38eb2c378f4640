"""
Workbook Reader

Decodes an .xlsx exercise workbook into a Grid with openpyxl. Formulas are
read as their cached values so help columns computed in the sheet come through
as numbers.
"""

import io
import logging
from pathlib import Path
from typing import List, Optional, Union

from openpyxl import load_workbook

from ..errors import WorkbookError
from .grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_SHEET = "Exercises"


def read_grid(content: bytes, sheet_name: str = DEFAULT_SHEET, source: str = "workbook") -> Grid:
    """Decode workbook bytes and return the named sheet as a Grid."""
    try:
        wb = load_workbook(io.BytesIO(content), data_only=True, read_only=True)
    except Exception as e:
        raise WorkbookError(f"Failed to open {source}: {e}") from e

    try:
        if sheet_name not in wb.sheetnames:
            raise WorkbookError(f"{sheet_name} sheet not found in {source}")
        ws = wb[sheet_name]
        rows = [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    logger.debug(f"Read {len(rows)} rows from sheet '{sheet_name}' of {source}")
    return Grid.from_rows(rows)


def read_grid_from_path(path: Union[str, Path], sheet_name: str = DEFAULT_SHEET) -> Grid:
    """Read the named sheet of the workbook at path."""
    path = Path(path)
    if not path.is_file():
        raise WorkbookError(f"{path} not found")
    return read_grid(path.read_bytes(), sheet_name=sheet_name, source=path.name)


def candidate_paths(filename: str, explicit_path: Optional[str] = None) -> List[Path]:
    """Places the workbook is looked up, in order."""
    paths: List[Path] = []
    if explicit_path:
        paths.append(Path(explicit_path))
    cwd = Path.cwd()
    paths.extend([
        cwd / "public" / filename,
        cwd / filename,
        Path(filename),
    ])
    return paths


def locate_workbook(filename: str, explicit_path: Optional[str] = None) -> Path:
    """Return the first existing workbook path, or raise WorkbookError."""
    tried = candidate_paths(filename, explicit_path)
    for path in tried:
        if path.is_file():
            return path

    logger.error(f"Workbook lookup failed; tried: {[str(p) for p in tried]}")
    raise WorkbookError(f"{filename} not found. Searched in {len(tried)} locations.")
