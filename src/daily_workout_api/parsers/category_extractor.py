"""
Category Extractor

Finds exercise categories in an "Exercises" sheet laid out by hand:
- Category headers anywhere in the sheet ("Squats:" or "Squats | Ratio | Help Column")
- Exercises listed below each header in the same column
- Ratio one column to the right, cumulative threshold (help column) two to the right
- Malformed cells are coerced and reported, never fatal
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..models import (
    Category,
    Diagnostic,
    DiagnosticKind,
    ExerciseEntry,
    ExtractionResult,
    WeightedCatalog,
)
from ..utils import clamp, to_float
from .grid import Cell, CellKind, Grid, is_colon_header, is_labelled_header, strip_header_colon

logger = logging.getLogger(__name__)

MAX_THRESHOLD = 100.0


@dataclass(frozen=True)
class HeaderPosition:
    """Where a category header was found"""
    name: str
    column: int
    row: int

    @property
    def start_row(self) -> int:
        # Exercises start on the next row
        return self.row + 1


class _Diagnostics:
    """Per-call collector so the extractor itself stays stateless."""

    def __init__(self):
        self.items: List[Diagnostic] = []

    def anomaly(self, message: str, row: Optional[int] = None, column: Optional[int] = None,
                category: Optional[str] = None) -> None:
        self.items.append(Diagnostic(
            kind=DiagnosticKind.STRUCTURAL_PARSE_ANOMALY,
            message=message,
            row=row,
            column=column,
            category=category,
        ))
        logger.warning(f"Catalog anomaly at row {row}, column {column}: {message}")


class CategoryExtractor:
    """Builds a WeightedCatalog from a grid of cells"""

    def extract(self, grid: Union[Grid, Iterable[Sequence[Any]]]) -> WeightedCatalog:
        """Return the catalog for grid, discarding diagnostics."""
        return self.parse(grid).catalog

    def parse(self, grid: Union[Grid, Iterable[Sequence[Any]]]) -> ExtractionResult:
        """Return the catalog for grid together with every absorbed anomaly."""
        if not isinstance(grid, Grid):
            grid = Grid.from_rows(grid)

        diagnostics = _Diagnostics()
        headers = self.find_headers(grid, diagnostics)
        header_names = {h.name for h in headers}

        categories: List[Category] = []
        for header in headers:
            entries = self._collect_entries(grid, header, header_names, diagnostics)
            if not entries:
                diagnostics.anomaly(
                    f"Category '{header.name}' has no exercises and was skipped",
                    row=header.row, column=header.column, category=header.name,
                )
                continue
            categories.append(Category(
                name=header.name,
                exercises=tuple(entries),
                origin_column=header.column,
                origin_row=header.row,
            ))

        logger.info(
            f"Extracted {len(categories)} categories from {len(grid)} rows "
            f"({len(diagnostics.items)} anomalies)"
        )
        return ExtractionResult(
            catalog=WeightedCatalog(categories=tuple(categories)),
            diagnostics=tuple(diagnostics.items),
        )

    def find_headers(self, grid: Grid, diagnostics: Optional[_Diagnostics] = None) -> List[HeaderPosition]:
        """Scan rows top to bottom, columns left to right, for category headers."""
        diagnostics = diagnostics or _Diagnostics()
        headers: List[HeaderPosition] = []

        for row_idx, row in enumerate(grid.rows):
            for col_idx, cell in enumerate(row):
                if not cell.is_text:
                    continue
                text = cell.text or ""

                if text.strip().endswith(":"):
                    if is_colon_header(text):
                        headers.append(HeaderPosition(strip_header_colon(text), col_idx, row_idx))
                    elif not strip_header_colon(text):
                        diagnostics.anomaly("Header cell has no name before the colon",
                                            row=row_idx, column=col_idx)
                    continue

                if is_labelled_header(text, grid.cell(row_idx, col_idx + 1), grid.cell(row_idx, col_idx + 2)):
                    headers.append(HeaderPosition(text.strip(), col_idx, row_idx))

        return headers

    def _collect_entries(
        self,
        grid: Grid,
        header: HeaderPosition,
        header_names: set,
        diagnostics: _Diagnostics,
    ) -> List[ExerciseEntry]:
        """Walk down the header's column until the category ends."""
        entries: List[ExerciseEntry] = []
        previous_threshold = 0.0

        for row_idx in range(header.start_row, len(grid)):
            cell = grid.cell(row_idx, header.column)
            if cell.is_absent:
                break

            name = cell.as_text().strip()
            if not name:
                break

            # Another header starts here
            if name.endswith(":"):
                break
            if strip_header_colon(name) in header_names and row_idx > header.start_row:
                break

            ratio = self._read_number(grid, row_idx, header.column + 1, "ratio", header.name, diagnostics)
            threshold = self._read_number(grid, row_idx, header.column + 2, "help column", header.name, diagnostics)

            if ratio < 0:
                diagnostics.anomaly(f"Negative ratio {ratio} for '{name}' set to 0",
                                    row=row_idx, column=header.column + 1, category=header.name)
                ratio = 0.0

            bounded = clamp(threshold, 0.0, MAX_THRESHOLD)
            if bounded != threshold:
                diagnostics.anomaly(f"Help column {threshold} for '{name}' clamped to {bounded}",
                                    row=row_idx, column=header.column + 2, category=header.name)
            if bounded < previous_threshold:
                diagnostics.anomaly(
                    f"Help column {bounded} for '{name}' is below the previous "
                    f"{previous_threshold}; raised to keep ranges ordered",
                    row=row_idx, column=header.column + 2, category=header.name,
                )
                bounded = previous_threshold

            entries.append(ExerciseEntry(name=name, ratio=ratio, cumulative_threshold=bounded))
            previous_threshold = bounded

        return entries

    @staticmethod
    def _read_number(grid: Grid, row_idx: int, column: int, label: str, category: str,
                     diagnostics: _Diagnostics) -> float:
        """Numeric value of a ratio/help cell; anything unreadable counts as 0."""
        cell: Cell = grid.cell(row_idx, column)
        value = cell.number if cell.kind == CellKind.NUMBER else to_float(cell.text)
        if value is None:
            shown = "empty" if cell.is_absent else repr(cell.as_text())
            diagnostics.anomaly(f"{label.capitalize()} cell is {shown}; using 0",
                                row=row_idx, column=column, category=category)
            return 0.0
        return value


def extract_catalog(grid: Union[Grid, Iterable[Sequence[Any]]]) -> WeightedCatalog:
    """Convenience wrapper around CategoryExtractor().extract()."""
    return CategoryExtractor().extract(grid)
