"""Wren — history-based navigation and sortable tables, rendered as HTML.

A small application shell: a path store kept in step with the platform
history, route guards that mount pages by exact path, links that
navigate without a page load, and a table with a stable tri-state sort.
Everything renders through kida templates.

Basic usage::

    from wren import Shell
    from kida.template import Markup

    shell = Shell()

    @shell.route("/", label="Home")
    def home():
        return Markup("<p>Home</p>")

    with shell:
        shell.click_link("/")
        print(shell.render())

Tables::

    from wren import TableView
    table = TableView(headers, rows)
    table.click_header("budget")   # ascending, then descending, then original order
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ActivationEvent",
    "ConfigurationError",
    "MemoryHistory",
    "NavigationContext",
    "NavigationError",
    "NavigationLink",
    "NavigationProvider",
    "PathStore",
    "RouteGuard",
    "Shell",
    "ShellConfig",
    "SortDirective",
    "TableView",
    "WrenError",
    "sort_rows",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Shell":
        from wren.shell import Shell

        return Shell

    if name == "ShellConfig":
        from wren.config import ShellConfig

        return ShellConfig

    if name in ("MemoryHistory", "NavigationContext", "NavigationProvider", "PathStore"):
        from wren import navigation as _nav

        return getattr(_nav, name)

    if name in ("ActivationEvent", "NavigationLink", "RouteGuard"):
        from wren import components as _components

        return getattr(_components, name)

    if name in ("SortDirective", "TableView", "sort_rows"):
        from wren import table as _table

        return getattr(_table, name)

    if name in ("ConfigurationError", "NavigationError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
