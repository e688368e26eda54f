"""Navigation-aware components: route guards, links, and the sidebar."""

from wren.components.events import ActivationEvent
from wren.components.link import NavigationLink
from wren.components.route import RouteDescriptor, RouteGuard, render_outlets, route_guard
from wren.components.sidebar import Sidebar

__all__ = [
    "ActivationEvent",
    "NavigationLink",
    "RouteDescriptor",
    "RouteGuard",
    "Sidebar",
    "render_outlets",
    "route_guard",
]
