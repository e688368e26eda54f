"""Built-in wren template filters and globals.

Auto-registered on every wren kida Environment. They cover the class
composition and optional-attribute patterns that every component
template needs.
"""

import html
from collections.abc import Mapping
from typing import Any

from kida.template import Markup


def class_names(*args: Any) -> str:
    """Join truthy class fragments into one ``class`` value.

    Accepts strings, iterables of strings, and mappings of
    ``{class: condition}``. Falsy entries are skipped and duplicate
    classes keep their first position.

    Example:
        class_names("btn", None, {"btn--active": active}, ["mx-2"])
        → "btn btn--active mx-2"   (when active is truthy)
    """
    seen: dict[str, None] = {}

    def _add(value: Any) -> None:
        if not value:
            return
        if isinstance(value, str):
            for token in value.split():
                seen.setdefault(token, None)
        elif isinstance(value, Mapping):
            for name, enabled in value.items():
                if enabled:
                    _add(name)
        elif isinstance(value, (list, tuple, set, frozenset)):
            for item in value:
                _add(item)

    for arg in args:
        _add(arg)
    return " ".join(seen)


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Shorthand for optional attributes without ``{% if %}`` blocks.

    Example:
        <th{{ hint | attr("title") }}>
        → <th title="Click to sort">   (when hint is "Click to sort")
        → <th>                         (when hint is None or "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def sort_icon(state: str | None) -> Markup:
    """Render the header sort indicator for a column state.

    ``"none"`` is a sortable column that is not the active sort key;
    ``"asc"`` / ``"desc"`` mark the active key; ``None`` renders nothing
    (column is not sortable).
    """
    if state == "asc":
        return Markup('<span class="ml-1 text-blue-500" data-sort-icon="asc">▲</span>')
    if state == "desc":
        return Markup('<span class="ml-1 text-blue-500" data-sort-icon="desc">▼</span>')
    if state == "none":
        return Markup('<span class="ml-1 text-gray-300" data-sort-icon="none">▲▼</span>')
    return Markup("")


BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "class_names": class_names,
    "sort_icon": sort_icon,
}

BUILTIN_GLOBALS: dict[str, Any] = {
    "class_names": class_names,
}
