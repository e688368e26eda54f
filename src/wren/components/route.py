"""Route guards — mount content only when the current path matches.

Matching is exact string equality. No prefixes, no parameters, no
trailing-slash handling. Several guards may share a path and then all
of them mount together (multiple outlets).
"""

import html
from collections.abc import Callable
from dataclasses import dataclass

from kida.template import Markup

from wren._internal.types import Path, Renderable, View
from wren.navigation.context import NavigationContext


def _mount(children: Renderable) -> View:
    return children() if callable(children) else children


def route_guard(path: Path, current_path: Path, children: Renderable) -> View | None:
    """Return the rendered *children* iff *path* equals *current_path*.

    Callable children are only invoked on a match, so a page that is not
    current is never built.
    """
    if path == current_path:
        return _mount(children)
    return None


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A statically declared route: a path and the page it renders."""

    path: Path
    render: Callable[[], View]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteGuard:
    """Component form of ``route_guard``, evaluated against a context.

    Holds no state of its own; call ``render()`` again after every
    navigation.
    """

    path: Path
    children: Renderable

    @classmethod
    def for_route(cls, route: RouteDescriptor) -> RouteGuard:
        return cls(route.path, route.render)

    def matches(self, ctx: NavigationContext) -> bool:
        return self.path == ctx.current_path

    def render(self, ctx: NavigationContext) -> View | None:
        return route_guard(self.path, ctx.current_path, self.children)


def render_outlets(guards: list[RouteGuard], ctx: NavigationContext) -> list[Markup]:
    """Render every guard against *ctx*, keeping only those that mounted.

    Plain ``str`` views are escaped; ``Markup`` passes through.
    """
    mounted: list[Markup] = []
    for guard in guards:
        view = guard.render(ctx)
        if view is None:
            continue
        mounted.append(view if isinstance(view, Markup) else Markup(html.escape(view)))
    return mounted
