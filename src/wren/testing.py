"""Assertion helpers and recorders for wren tests.

Convenience functions to verify rendered shell HTML and table order.
Each assertion produces a clear error message on failure.
"""

import re
from collections.abc import Sequence
from typing import Any

from wren.table.view import TableView


class PathRecorder:
    """A path-change subscriber that remembers every path it was given."""

    __slots__ = ("paths",)

    def __init__(self) -> None:
        self.paths: list[str] = []

    def __call__(self, path: str) -> None:
        self.paths.append(path)

    def __len__(self) -> int:
        return len(self.paths)


def assert_contains(html: str, text: str) -> None:
    """Assert the rendered HTML contains the given text."""
    assert text in html, f"HTML does not contain {text!r}.\nHTML: {html[:500]}"


def assert_not_contains(html: str, text: str) -> None:
    """Assert the rendered HTML does **not** contain the given text."""
    assert text not in html, f"HTML unexpectedly contains {text!r}.\nHTML: {html[:500]}"


def _anchor_for(html: str, href: str) -> str:
    match = re.search(rf'<a href="{re.escape(href)}"[^>]*>', html)
    assert match is not None, f"No link with href={href!r}.\nHTML: {html[:500]}"
    return match.group(0)


def assert_active_link(html: str, href: str) -> None:
    """Assert the link to *href* is rendered in its active state."""
    anchor = _anchor_for(html, href)
    assert 'aria-current="page"' in anchor, f"Link {href!r} is not active: {anchor}"


def assert_inactive_link(html: str, href: str) -> None:
    """Assert the link to *href* is rendered but not active."""
    anchor = _anchor_for(html, href)
    assert 'aria-current="page"' not in anchor, f"Link {href!r} is unexpectedly active: {anchor}"


def assert_row_order(table: TableView, key: str, expected: Sequence[Any]) -> None:
    """Assert the table displays rows whose *key* values are *expected*, in order."""
    actual = [row.get(key) for row in table.display_rows()]
    assert actual == list(expected), (
        f"Table {table.table_id} order by {key!r} is {actual}, expected {list(expected)} "
        f"(directive: {table.directive})"
    )
