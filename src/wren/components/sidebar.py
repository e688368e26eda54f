"""Sidebar — the shell's list of navigation links."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from kida import Environment
from kida.template import Markup

from wren._internal.types import Path
from wren.components.link import NavigationLink
from wren.navigation.context import NavigationContext
from wren.templating.integration import render_template

LINK_CLASS = (
    "w-full px-4 py-2.5 text-gray-600 transition-all duration-200 ease-in-out "
    "hover:bg-blue-50 hover:text-blue-600 rounded-lg"
)
ACTIVE_LINK_CLASS = "bg-blue-100 text-blue-700 font-medium border-blue-600"


@dataclass(slots=True)
class Sidebar:
    """Ordered navigation links, one per ``(label, path)`` entry."""

    links: list[NavigationLink] = field(default_factory=list)
    container_class: str = "sticky top-0 self-start pt-8 border-r border-gray-400 min-h-screen pr-8"
    nav_class: str = "flex flex-col space-y-2"

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, Path]]) -> Sidebar:
        return cls(
            links=[
                NavigationLink(
                    to=path,
                    label=label,
                    class_name=LINK_CLASS,
                    active_class_name=ACTIVE_LINK_CLASS,
                )
                for label, path in entries
            ]
        )

    def add(self, label: str, path: Path) -> NavigationLink:
        link = NavigationLink(
            to=path, label=label, class_name=LINK_CLASS, active_class_name=ACTIVE_LINK_CLASS
        )
        self.links.append(link)
        return link

    def link_for(self, path: Path) -> NavigationLink | None:
        for link in self.links:
            if link.to == path:
                return link
        return None

    def active_link(self, current_path: Path) -> NavigationLink | None:
        return self.link_for(current_path)

    def render(self, ctx: NavigationContext, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/sidebar.html",
            {
                "container_class": self.container_class,
                "nav_class": self.nav_class,
                "links": [link.render(ctx, env) for link in self.links],
            },
        )
