"""The application shell.

Mutable during setup (route registration, sidebar links). Mounted with
``mount()`` or as a context manager: mounting starts navigation and
subscribes a re-render to every path change; unmounting releases both.

Usage::

    shell = Shell(ShellConfig(title="Widgets"))

    @shell.route("/", label="Home")
    def home():
        return Markup("<p>Welcome</p>")

    with shell:
        shell.click_link("/")
        html = shell.render()
"""

import logging
from collections.abc import Callable
from types import TracebackType

from kida import Environment
from kida.template import Markup

from wren._internal.logs import configure_logging
from wren._internal.types import Path, View
from wren.components.events import ActivationEvent
from wren.components.link import NavigationLink
from wren.components.route import RouteDescriptor, RouteGuard, render_outlets
from wren.components.sidebar import Sidebar
from wren.config import ShellConfig
from wren.errors import ConfigurationError
from wren.navigation.context import NavigationContext, NavigationProvider
from wren.navigation.history import PlatformHistory
from wren.templating.integration import create_environment, render_template

logger = logging.getLogger("wren.shell")


class Shell:
    """Sidebar, route table, and the navigation provider that drives them."""

    __slots__ = (
        "_last_render",
        "_render_count",
        "_unsubscribe",
        "config",
        "env",
        "provider",
        "routes",
        "sidebar",
    )

    def __init__(
        self,
        config: ShellConfig | None = None,
        *,
        history: PlatformHistory | None = None,
        sidebar: Sidebar | None = None,
        env: Environment | None = None,
    ) -> None:
        self.config: ShellConfig = config or ShellConfig()
        if self.config.log_level is not None:
            configure_logging(self.config.log_level)
        self.provider = NavigationProvider(history, initial_path=self.config.initial_path)
        self.sidebar = sidebar or Sidebar()
        self.env: Environment = env or create_environment(self.config)
        self.routes: list[RouteDescriptor] = []
        self._unsubscribe: Callable[[], None] | None = None
        self._last_render: Markup | None = None
        self._render_count = 0

    # -- Setup --

    def add_route(
        self,
        path: Path,
        render: Callable[[], View],
        *,
        name: str | None = None,
        label: str | None = None,
    ) -> RouteDescriptor:
        """Register a page. ``label`` also adds a sidebar link."""
        if not isinstance(path, str):
            msg = f"Route path must be a str, got {path!r}"
            raise ConfigurationError(msg)
        route = RouteDescriptor(path=path, render=render, name=name)
        self.routes.append(route)
        if label is not None and self.sidebar.link_for(path) is None:
            self.sidebar.add(label, path)
        return route

    def route(
        self,
        path: Path,
        *,
        name: str | None = None,
        label: str | None = None,
    ) -> Callable[[Callable[[], View]], Callable[[], View]]:
        """Decorator form of ``add_route()``."""

        def decorator(func: Callable[[], View]) -> Callable[[], View]:
            self.add_route(path, func, name=name or func.__name__, label=label)
            return func

        return decorator

    # -- Navigation --

    @property
    def current_path(self) -> Path:
        return self.provider.current_path

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def context(self) -> NavigationContext:
        return self.provider.context()

    def navigate(self, to: Path) -> bool:
        return self.provider.navigate(to)

    def click_link(self, to: Path, event: ActivationEvent | None = None) -> bool:
        """Activate the sidebar link for *to* (or an ad-hoc link if none)."""
        link = self.sidebar.link_for(to) or NavigationLink(to=to, label=to)
        return link.activate(self.context(), event)

    # -- Lifecycle --

    def mount(self) -> None:
        if self.mounted:
            return
        self.provider.start()
        self._unsubscribe = self.provider.subscribe(self._on_path_change)
        logger.debug("shell mounted at %r with %d routes", self.current_path, len(self.routes))
        self._rerender()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.provider.stop()
        logger.debug("shell unmounted")

    def __enter__(self) -> Shell:
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    # -- Rendering --

    @property
    def guards(self) -> list[RouteGuard]:
        return [RouteGuard.for_route(route) for route in self.routes]

    @property
    def last_render(self) -> Markup | None:
        """HTML from the most recent render triggered while mounted."""
        return self._last_render

    @property
    def render_count(self) -> int:
        return self._render_count

    def matched_routes(self) -> list[RouteDescriptor]:
        return [route for route in self.routes if route.path == self.current_path]

    def outlets(self) -> list[Markup]:
        return render_outlets(self.guards, self.context())

    def render(self) -> Markup:
        ctx = self.context()
        return render_template(
            self.env,
            "wren/shell.html",
            {
                "title": self.config.title,
                "heading": self.config.heading,
                "current_path": ctx.current_path,
                "sidebar": self.sidebar.render(ctx, self.env),
                "outlets": render_outlets(self.guards, ctx),
            },
        )

    def _on_path_change(self, path: Path) -> None:
        if not any(route.path == path for route in self.routes):
            logger.debug("no route registered for %r", path)
        self._rerender()

    def _rerender(self) -> None:
        self._last_render = self.render()
        self._render_count += 1
