"""Column descriptors and the ``headers`` data contract.

Callers describe a table with plain dicts::

    headers = [
        {"column": "Budget", "key": "budget", "sort": True,
         "render": lambda row: f"${row['budget']:,}"},
        {"column": "Notes", "key": "notes"},
    ]

``columns_from_headers()`` turns that into frozen ``ColumnDescriptor``s,
filling in defaults (not sortable, field-lookup renderer) and rejecting
duplicate or missing keys.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from wren._internal.types import Cell, Row
from wren.errors import ConfigurationError


def field_renderer(key: str) -> Callable[[Row], Cell]:
    """The default renderer: look the column's key up on the row."""

    def render(row: Row) -> Cell:
        return row.get(key)

    return render


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """One table column. ``render`` defaults to a lookup of ``key``."""

    key: str
    label: str
    sortable: bool = False
    render: Callable[[Row], Cell] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            msg = f"Column key must be a non-empty str, got {self.key!r}"
            raise ConfigurationError(msg)
        if self.render is None:
            object.__setattr__(self, "render", field_renderer(self.key))

    def cell(self, row: Row) -> Cell:
        render = self.render or field_renderer(self.key)
        return render(row)


def column_from_header(header: Mapping[str, Any]) -> ColumnDescriptor:
    """Build one descriptor from a ``{"column", "key", "sort"?, "render"?}`` dict."""
    if "key" not in header:
        msg = f"Table header is missing 'key': {dict(header)!r}"
        raise ConfigurationError(msg)
    key = header["key"]
    return ColumnDescriptor(
        key=key,
        label=str(header.get("column", key)),
        sortable=bool(header.get("sort", False)),
        render=header.get("render"),
    )


def columns_from_headers(
    headers: Iterable[Mapping[str, Any] | ColumnDescriptor],
) -> tuple[ColumnDescriptor, ...]:
    """Normalize headers into descriptors, checking keys are unique."""
    columns = tuple(
        h if isinstance(h, ColumnDescriptor) else column_from_header(h) for h in headers
    )
    check_unique_keys(columns)
    return columns


def check_unique_keys(columns: Sequence[ColumnDescriptor]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.key in seen:
            msg = f"Duplicate column key {column.key!r}; keys must be unique per table"
            raise ConfigurationError(msg)
        seen.add(column.key)
