"""Grid parsing for the exercise catalog."""
from .category_extractor import CategoryExtractor, HeaderPosition, extract_catalog
from .grid import Cell, CellKind, Grid, is_colon_header, is_labelled_header

__all__ = [
    "CategoryExtractor",
    "HeaderPosition",
    "extract_catalog",
    "Cell",
    "CellKind",
    "Grid",
    "is_colon_header",
    "is_labelled_header",
]
