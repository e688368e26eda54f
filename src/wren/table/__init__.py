"""Tables — a stable, tri-state, type-aware sort engine and the view that uses it."""

from wren.table.columns import ColumnDescriptor, columns_from_headers, field_renderer
from wren.table.sort import (
    UNSORTED,
    SortDirection,
    SortDirective,
    compare_values,
    next_directive,
    sort_rows,
)
from wren.table.view import TableStyles, TableView

__all__ = [
    "UNSORTED",
    "ColumnDescriptor",
    "SortDirection",
    "SortDirective",
    "TableStyles",
    "TableView",
    "columns_from_headers",
    "compare_values",
    "field_renderer",
    "next_directive",
    "sort_rows",
]
