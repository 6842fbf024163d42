"""View state for the results table"""

from .table import (
    TableState, RecordRow, SortField, SortDirection, StatusFilter, EmptyState,
    build_row, format_key_points,
)

__all__ = [
    "TableState", "RecordRow", "SortField", "SortDirection", "StatusFilter", "EmptyState",
    "build_row", "format_key_points",
]
