"""TableView — a sortable table over caller-supplied headers and rows.

Each TableView owns its own ``SortDirective``; two tables on the same
page sort independently. Rows are never mutated or reordered in place:
every render works on a derived ordering from ``sort_rows()``.
"""

import logging
import uuid
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from kida import Environment
from kida.template import Markup

from wren._internal.types import Cell, Row
from wren.components.events import ActivationEvent
from wren.errors import ConfigurationError
from wren.table.columns import ColumnDescriptor, columns_from_headers
from wren.table.sort import UNSORTED, SortDirective, next_directive, sort_rows
from wren.templating.filters import class_names
from wren.templating.integration import render_template

logger = logging.getLogger("wren.table")

RowClickHandler = Callable[[Row, int], Any]


@dataclass(frozen=True, slots=True)
class TableStyles:
    """Class strings for each part of the table.

    ``merged()`` appends caller overrides to the defaults rather than
    replacing them.
    """

    container: str = "mb-4"
    title: str = "text-xl font-semibold mb-2"
    wrapper: str = "overflow-x-auto"
    table: str = "min-w-full border-separate border border-gray-300 rounded-lg"
    header_row: str = "bg-gray-200"
    header_cell: str = "border border-gray-400 p-2 font-semibold text-left"
    sortable_header: str = "cursor-pointer hover:bg-gray-300 select-none"
    body_row: str = "bg-white hover:bg-gray-100"
    body_cell: str = "border border-gray-300 p-2"

    def merged(self, overrides: Mapping[str, str] | None) -> TableStyles:
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            msg = f"Unknown table style section(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        return TableStyles(
            **{
                name: class_names(getattr(self, name), overrides.get(name))
                for name in known
            }
        )


@dataclass(frozen=True, slots=True)
class HeaderView:
    key: str
    label: str
    classes: str
    hint: str | None
    state: str | None  # "none" / "asc" / "desc" for sortable columns, else None


@dataclass(frozen=True, slots=True)
class RowView:
    index: int
    row: Row
    cells: tuple[Markup | str, ...]


def _cell_html(value: Cell) -> Markup | str:
    if value is None:
        return ""
    if isinstance(value, Markup):
        return value
    return str(value)


class TableView:
    """A sortable table.

    Usage::

        table = TableView(
            headers=[{"column": "Name", "key": "name", "sort": True}],
            rows=[{"name": "b"}, {"name": "a"}],
        )
        table.click_header("name")            # ascending
        [r["name"] for r in table.display_rows()]   # ["a", "b"]
    """

    __slots__ = (
        "_cache",
        "_directive",
        "columns",
        "on_row_click",
        "rows",
        "styles",
        "table_id",
        "title",
    )

    def __init__(
        self,
        headers: Iterable[Mapping[str, Any] | ColumnDescriptor],
        rows: Sequence[Row],
        *,
        title: str | None = "Data Table",
        table_id: str | None = None,
        styles: Mapping[str, str] | None = None,
        on_row_click: RowClickHandler | None = None,
        directive: SortDirective = UNSORTED,
    ) -> None:
        self.columns: tuple[ColumnDescriptor, ...] = columns_from_headers(headers)
        self.rows: tuple[Row, ...] = tuple(rows)
        self.title = title
        self.table_id: str = table_id or f"table-{uuid.uuid4().hex[:9]}"
        self.styles = TableStyles().merged(styles)
        self.on_row_click = on_row_click
        self._cache: tuple[SortDirective, list[Row]] | None = None
        self._directive = UNSORTED
        self.directive = directive

    @classmethod
    def from_data(cls, data: Mapping[str, Any], **kwargs: Any) -> TableView:
        """Build from a ``{"headers": [...], "rows": [...]}`` mapping."""
        return cls(data["headers"], data["rows"], **kwargs)

    # -- Sort state --

    @property
    def directive(self) -> SortDirective:
        return self._directive

    @directive.setter
    def directive(self, directive: SortDirective) -> None:
        if directive.key is not None:
            column = self.column(directive.key)
            if not column.sortable:
                msg = f"Column {directive.key!r} is not sortable"
                raise ConfigurationError(msg)
        self._directive = directive
        logger.debug("Table %s - sort: %s %s", self.table_id, directive.key, directive.direction)

    def column(self, key: str) -> ColumnDescriptor:
        for column in self.columns:
            if column.key == key:
                return column
        msg = f"Table {self.table_id} has no column {key!r}"
        raise ConfigurationError(msg)

    def click_header(self, key: str) -> SortDirective:
        """Advance the sort cycle for column *key*.

        Clicking a non-sortable header changes nothing.
        """
        if self.column(key).sortable:
            self.directive = next_directive(self._directive, key)
        return self._directive

    def reset_sort(self) -> None:
        self.directive = UNSORTED

    def display_rows(self) -> list[Row]:
        """Rows in display order for the current directive (cached per directive)."""
        if self._cache is None or self._cache[0] != self._directive:
            self._cache = (self._directive, sort_rows(self.rows, self._directive))
        return list(self._cache[1])

    # -- Row activation --

    def click_row(self, index: int, event: ActivationEvent | None = None) -> bool:
        """Activate the displayed row at *index*.

        Returns ``True`` if ``on_row_click`` ran. It does not run when the
        click came from an interactive cell child that stopped
        propagation (a mailto link, for instance).
        An index outside the displayed rows raises ``IndexError``.
        """
        if self.on_row_click is None:
            return False
        if event is not None and event.propagation_stopped:
            return False
        rows = self.display_rows()
        if not 0 <= index < len(rows):
            msg = f"Table {self.table_id} has no row {index}"
            raise IndexError(msg)
        self.on_row_click(rows[index], index)
        return True

    # -- Rendering --

    def header_views(self) -> list[HeaderView]:
        views = []
        for column in self.columns:
            views.append(
                HeaderView(
                    key=column.key,
                    label=column.label,
                    classes=class_names(
                        self.styles.header_cell,
                        {self.styles.sortable_header: column.sortable},
                    ),
                    hint="Click to sort" if column.sortable else None,
                    state=self._directive.state_for(column.key) if column.sortable else None,
                )
            )
        return views

    def row_views(self) -> list[RowView]:
        return [
            RowView(
                index=i,
                row=row,
                cells=tuple(_cell_html(column.cell(row)) for column in self.columns),
            )
            for i, row in enumerate(self.display_rows())
        ]

    def render(self, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/table.html",
            {
                "table_id": self.table_id,
                "title": self.title,
                "styles": self.styles,
                "headers": self.header_views(),
                "body": self.row_views(),
            },
        )

    def __repr__(self) -> str:
        return f"<TableView {self.table_id} columns={len(self.columns)} rows={len(self.rows)}>"
