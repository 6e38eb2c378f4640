"""
Grid Cells

Typed view over the loosely-typed rows a spreadsheet decoder produces, plus
the two header predicates used by the category extractor.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple


class CellKind(str, Enum):
    """Kinds of value a grid cell can hold"""
    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"


# Column labels that end with a colon but never name a category
RESERVED_LABELS = frozenset({"ratio", "help column"})

RATIO_LABEL = "ratio"
HELP_LABEL = "help"


@dataclass(frozen=True)
class Cell:
    """One grid position"""
    kind: CellKind = CellKind.ABSENT
    text: Optional[str] = None
    number: Optional[float] = None

    @classmethod
    def from_raw(cls, value: Any) -> "Cell":
        """Normalise a decoder value into a Cell."""
        if value is None:
            return ABSENT
        if isinstance(value, bool):
            return cls(kind=CellKind.TEXT, text=str(value).upper())
        if isinstance(value, (int, float)):
            number = float(value)
            if math.isnan(number):
                return ABSENT
            return cls(kind=CellKind.NUMBER, number=number)
        if isinstance(value, (datetime, date, time)):
            return cls(kind=CellKind.TEXT, text=value.isoformat())
        text = str(value)
        if not text.strip():
            return ABSENT
        return cls(kind=CellKind.TEXT, text=text)

    @property
    def is_absent(self) -> bool:
        return self.kind == CellKind.ABSENT

    @property
    def is_text(self) -> bool:
        return self.kind == CellKind.TEXT

    def as_text(self) -> str:
        """Display string for the cell; integral numbers drop the '.0'."""
        if self.kind == CellKind.TEXT:
            return self.text or ""
        if self.kind == CellKind.NUMBER and self.number is not None:
            if self.number.is_integer():
                return str(int(self.number))
            return repr(self.number)
        return ""


ABSENT = Cell()

Row = Tuple[Cell, ...]


class Grid:
    """Rows of cells; rows may differ in length and missing cells read as absent."""

    def __init__(self, rows: Iterable[Sequence[Any]] = ()):
        self.rows: Tuple[Row, ...] = tuple(
            tuple(c if isinstance(c, Cell) else Cell.from_raw(c) for c in (row or ()))
            for row in rows
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Grid":
        return cls(rows)

    def cell(self, row: int, column: int) -> Cell:
        """Cell at (row, column), or ABSENT when outside the grid."""
        if row < 0 or column < 0 or row >= len(self.rows):
            return ABSENT
        cells = self.rows[row]
        if column >= len(cells):
            return ABSENT
        return cells[column]

    def __len__(self) -> int:
        return len(self.rows)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Grid) and self.rows == other.rows


# ---------------------------------------------------------------------------
# Header predicates
# ---------------------------------------------------------------------------


def strip_header_colon(text: str) -> str:
    """'Squats:' -> 'Squats'"""
    text = text.strip()
    if text.endswith(":"):
        text = text[:-1]
    return text.strip()


def is_reserved_label(name: str) -> bool:
    return name.strip().lower() in RESERVED_LABELS


def is_colon_header(text: str) -> bool:
    """
    A header written with a trailing colon, e.g. "Squats:".

    Column labels such as "Ratio:" or "Help Column:" are not headers.
    """
    if not text or not text.strip().endswith(":"):
        return False
    name = strip_header_colon(text)
    return bool(name) and not is_reserved_label(name)


def is_labelled_header(text: str, ratio_cell: Cell, help_cell: Cell) -> bool:
    """
    An un-punctuated header recognised by the labels to its right, e.g.
    "Squats | Ratio | Help Column".
    """
    if not text:
        return False
    name = text.strip()
    if name.endswith(":") or len(name) <= 2 or is_reserved_label(name):
        return False
    return (
        RATIO_LABEL in ratio_cell.as_text().lower()
        and HELP_LABEL in help_cell.as_text().lower()
    )
