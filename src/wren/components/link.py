"""Navigation links — anchors that navigate without a page load.

A primary-button click with no new-tab modifier is intercepted: the
default action is prevented and ``navigate(to)`` is called once. Any
other click is left alone so the platform can open a new tab or window.
"""

import logging
from dataclasses import dataclass

from kida import Environment
from kida.template import Markup

from wren._internal.types import Path
from wren.components.events import PRIMARY_BUTTON, ActivationEvent
from wren.navigation.context import NavigationContext
from wren.templating.filters import class_names
from wren.templating.integration import render_template

logger = logging.getLogger("wren.navigation")

BASE_CLASS = "block text-base select-none cursor-pointer"


@dataclass(frozen=True, slots=True)
class NavigationLink:
    """An anchor bound to a target path.

    ``active_class_name`` is appended while ``to`` is the current path;
    being active has no navigation side effect.
    """

    to: Path
    label: str | Markup
    class_name: str = ""
    active_class_name: str = ""

    def is_active(self, current_path: Path) -> bool:
        return self.to == current_path

    def should_intercept(self, event: ActivationEvent) -> bool:
        return event.button == PRIMARY_BUTTON and not event.opens_new_context

    def activate(self, ctx: NavigationContext, event: ActivationEvent | None = None) -> bool:
        """Handle a click on this link.

        Returns ``True`` when the click was intercepted (whether or not
        the path actually changed), ``False`` when it was left to the
        platform.
        """
        event = event if event is not None else ActivationEvent()
        if not self.should_intercept(event):
            logger.debug("link %r: modified click left to the platform", self.to)
            return False
        event.prevent_default()
        ctx.navigate(self.to)
        return True

    def classes(self, current_path: Path) -> str:
        return class_names(
            BASE_CLASS,
            self.class_name,
            {self.active_class_name: self.is_active(current_path)},
        )

    def render(self, ctx: NavigationContext, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/link.html",
            {
                "href": self.to,
                "label": self.label,
                "classes": self.classes(ctx.current_path),
                "active": self.is_active(ctx.current_path),
            },
        )
