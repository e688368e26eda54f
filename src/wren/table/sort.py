"""Table sort engine — directives, the tri-state cycle, and row ordering.

Ordering rules for one column:

- both values numeric (``int``/``float``, not ``bool``) → numeric order
- otherwise both values are turned into text and compared case-insensitively
  first (``str.casefold``), then with the active locale's collation
  (``locale.strcoll``) to break ties between differently-cased text
- a missing field, ``None`` or NaN is the empty string, so it sorts first
  ascending and last descending instead of raising

Sorting is stable in both directions: rows with equal keys keep their
input order. The input sequence is never mutated.

Header clicks move a ``SortDirective`` through an explicit transition
table::

    (none)        --click k-->  (k, asc)
    (k, asc)      --click k-->  (k, desc)
    (k, desc)     --click k-->  (none)
    (k, any)      --click k'->  (k', asc)
"""

import functools
import locale
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from wren._internal.types import Row
from wren.errors import ConfigurationError

_MISSING = object()


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortDirective:
    """Which column a table is sorted by, and which way.

    ``SortDirective()`` (both ``None``) means original row order. A key
    without a direction, or a direction without a key, is rejected.
    """

    key: str | None = None
    direction: SortDirection | None = None

    def __post_init__(self) -> None:
        if self.direction is not None and not isinstance(self.direction, SortDirection):
            try:
                object.__setattr__(self, "direction", SortDirection(self.direction))
            except ValueError:
                msg = f"Sort direction must be 'asc', 'desc' or None, got {self.direction!r}"
                raise ConfigurationError(msg) from None
        if (self.key is None) != (self.direction is None):
            msg = f"Sort key and direction must both be set or both be None: {self!r}"
            raise ConfigurationError(msg)

    @property
    def is_unsorted(self) -> bool:
        return self.key is None

    def state_for(self, key: str) -> str:
        """``"asc"``/``"desc"`` if *key* is the active column, else ``"none"``."""
        if self.key == key and self.direction is not None:
            return self.direction.value
        return "none"


UNSORTED = SortDirective()

# Direction of the active column -> direction after clicking it again.
# A click on any other column always lands on ascending.
_SAME_COLUMN: dict[SortDirection | None, SortDirection | None] = {
    None: SortDirection.ASC,
    SortDirection.ASC: SortDirection.DESC,
    SortDirection.DESC: None,
}


def next_directive(directive: SortDirective, clicked: str) -> SortDirective:
    """Apply one header click on column *clicked* to *directive*."""
    if directive.key != clicked:
        return SortDirective(clicked, SortDirection.ASC)
    direction = _SAME_COLUMN[directive.direction]
    if direction is None:
        return UNSORTED
    return SortDirective(clicked, direction)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not _is_nan(value)


def _as_text(value: Any) -> str:
    if value is _MISSING or value is None or _is_nan(value):
        return ""
    return str(value)


def _compare_text(a: str, b: str) -> int:
    folded_a, folded_b = a.casefold(), b.casefold()
    if folded_a != folded_b:
        return locale.strcoll(folded_a, folded_b)
    return locale.strcoll(a, b)


def compare_values(a: Any, b: Any) -> int:
    """Three-way compare two cell values (ascending)."""
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    return _compare_text(_as_text(a), _as_text(b))


def sort_rows(rows: Sequence[Row], directive: SortDirective) -> list[Row]:
    """Return *rows* in display order for *directive*.

    Always returns a new list; with no sort key it is a plain copy.
    """
    if directive.key is None:
        return list(rows)
    key = directive.key

    def _compare(a: Row, b: Row) -> int:
        return compare_values(a.get(key, _MISSING), b.get(key, _MISSING))

    # sorted(reverse=True) keeps equal elements in input order, so ties
    # stay stable descending too.
    return sorted(
        rows,
        key=functools.cmp_to_key(_compare),
        reverse=directive.direction is SortDirection.DESC,
    )
