"""Tests for wren.components.route — exact-path route guards."""

from kida.template import Markup

from wren.components.route import RouteDescriptor, RouteGuard, render_outlets, route_guard
from wren.navigation.context import NavigationProvider


class TestRouteGuardFunction:
    def test_renders_on_match(self) -> None:
        assert route_guard("/x", "/x", "child") == "child"

    def test_renders_nothing_otherwise(self) -> None:
        assert route_guard("/x", "/y", "child") is None

    def test_exact_equality_only(self) -> None:
        assert route_guard("/x", "/x/", "child") is None
        assert route_guard("/x", "/x/y", "child") is None
        assert route_guard("/", "/x", "child") is None

    def test_callable_children_only_built_on_match(self) -> None:
        built: list[str] = []

        def page() -> str:
            built.append("page")
            return "page"

        assert route_guard("/x", "/y", page) is None
        assert built == []
        assert route_guard("/x", "/x", page) == "page"
        assert built == ["page"]


class TestRouteGuardComponent:
    def test_reevaluates_after_navigation(self) -> None:
        nav = NavigationProvider(initial_path="/x")
        guard = RouteGuard("/x", Markup("<p>x</p>"))

        assert guard.render(nav.context()) == Markup("<p>x</p>")
        nav.navigate("/other")
        assert guard.render(nav.context()) is None
        nav.navigate("/x")
        assert guard.render(nav.context()) == Markup("<p>x</p>")

    def test_for_route(self) -> None:
        route = RouteDescriptor("/a", lambda: "A", name="a")
        guard = RouteGuard.for_route(route)
        assert guard.path == "/a"
        assert guard.matches(NavigationProvider(initial_path="/a").context())


class TestRenderOutlets:
    def test_multiple_guards_same_path_all_mount(self) -> None:
        ctx = NavigationProvider(initial_path="/x").context()
        guards = [
            RouteGuard("/x", Markup("<p>one</p>")),
            RouteGuard("/y", Markup("<p>other</p>")),
            RouteGuard("/x", Markup("<p>two</p>")),
        ]
        assert render_outlets(guards, ctx) == [Markup("<p>one</p>"), Markup("<p>two</p>")]

    def test_plain_strings_are_escaped(self) -> None:
        ctx = NavigationProvider(initial_path="/").context()
        [view] = render_outlets([RouteGuard("/", "<b>")], ctx)
        assert "&lt;b&gt;" in view

    def test_nothing_mounted(self) -> None:
        ctx = NavigationProvider(initial_path="/nowhere").context()
        assert render_outlets([RouteGuard("/", "home")], ctx) == []
