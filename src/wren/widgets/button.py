"""Button — a styled ``<button>`` with one color variant."""

from dataclasses import dataclass

from kida import Environment
from kida.template import Markup

from wren.errors import ConfigurationError
from wren.templating.filters import class_names
from wren.templating.integration import render_template

BASE_CLASS = "flex items-center px-3 py-1.5 border"

# variant -> (border, fill, outline text color)
VARIANTS: dict[str, tuple[str, str, str]] = {
    "primary": ("border-blue-500", "bg-blue-500", "text-blue-500"),
    "secondary": ("border-gray-900", "bg-gray-900", "text-gray-900"),
    "success": ("border-green-500", "bg-green-500", "text-green-500"),
    "warning": ("border-yellow-400", "bg-yellow-400", "text-yellow-400"),
    "danger": ("border-red-500", "bg-red-500", "text-red-500"),
}


@dataclass(frozen=True, slots=True)
class Button:
    """A button. ``variant`` is one of ``VARIANTS`` or ``None``.

    ``outline`` swaps the fill for a white background with variant-colored
    text; ``rounded`` makes it a pill.
    """

    label: str | Markup
    variant: str | None = None
    outline: bool = False
    rounded: bool = False
    class_name: str = ""
    type: str = "button"

    def __post_init__(self) -> None:
        if self.variant is not None and self.variant not in VARIANTS:
            msg = f"Unknown button variant {self.variant!r}; expected one of {sorted(VARIANTS)}"
            raise ConfigurationError(msg)

    @property
    def classes(self) -> str:
        color: list[str] = []
        if self.variant is not None:
            border, fill, text = VARIANTS[self.variant]
            color = [border, "bg-white", text] if self.outline else [border, fill, "text-white"]
        elif self.outline:
            color = ["bg-white"]
        return class_names(self.class_name, BASE_CLASS, color, {"rounded-full": self.rounded})

    def render(self, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/button.html",
            {"label": self.label, "classes": self.classes, "type": self.type},
        )
