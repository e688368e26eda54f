"""Wren exception hierarchy.

Shared across the navigation core, the table engine, and the widgets so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a component is declared with invalid configuration.

    Typically raised eagerly at construction time: duplicate column keys,
    a sort directive naming a column that cannot be sorted, and so on.
    """


class NavigationError(WrenError):
    """Raised when a navigation target is not a usable path.

    Navigating to the current path is *not* an error; it is a no-op.
    """
