"""Shared type aliases used across wren modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from kida.template import Markup

# A logical view identifier, compared by exact equality
Path: TypeAlias = str

# Rendered HTML: Markup is passed through unescaped, plain str is escaped
View: TypeAlias = Markup | str

# Something a route or guard can mount: a view, or a callable producing one
Renderable: TypeAlias = View | Callable[[], View]

# A table row: arbitrary field name to value mapping
Row: TypeAlias = Mapping[str, Any]

# What a column renderer returns for one cell
Cell: TypeAlias = Markup | str | int | float | None

# Path-change subscriber: receives the new path
Subscriber: TypeAlias = Callable[[str], None]

# Returned by subscribe(); calling it more than once is a no-op
Unsubscribe: TypeAlias = Callable[[], None]
