"""Panel — a bordered card around arbitrary content."""

from dataclasses import dataclass, field

from kida import Environment
from kida.template import Markup

from wren.templating.filters import attr, class_names
from wren.templating.integration import render_template

BASE_CLASS = "border rounded p-3 shadow bg-white w-full"


@dataclass(frozen=True, slots=True)
class Panel:
    content: str | Markup
    class_name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)

    def render(self, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/panel.html",
            {
                "content": self.content,
                "classes": class_names(BASE_CLASS, self.class_name),
                "attrs": Markup("".join(attr(value, name) for name, value in sorted(self.attrs.items()))),
            },
        )
