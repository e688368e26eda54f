"""Dropdowns — a native ``<select>`` and a custom listbox.

Both are controlled: the caller owns the selected option and passes an
``on_change`` callback that receives the chosen ``Option``.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from kida import Environment
from kida.template import Markup

from wren.components.events import ActivationEvent
from wren.templating.integration import render_template


@dataclass(frozen=True, slots=True)
class Option:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class DropdownConfig:
    name: str
    label: str
    options: tuple[Option, ...]

    @classmethod
    def build(cls, name: str, label: str, options: Sequence[Option | tuple[str, str]]) -> DropdownConfig:
        return cls(
            name=name,
            label=label,
            options=tuple(o if isinstance(o, Option) else Option(*o) for o in options),
        )

    def find(self, value: str) -> Option | None:
        for option in self.options:
            if option.value == value:
                return option
        return None


ChangeHandler = Callable[[Option | None], Any]


@dataclass(frozen=True, slots=True)
class _OptionView:
    index: int
    label: str
    value: str
    selected: bool
    classes: str


class Dropdown:
    """Native select. ``select(value)`` is the ``change`` event."""

    __slots__ = ("config", "on_change", "value")

    def __init__(
        self,
        config: DropdownConfig,
        value: Option | None = None,
        on_change: ChangeHandler | None = None,
    ) -> None:
        self.config = config
        self.value = value
        self.on_change = on_change

    def select(self, value: str) -> Option | None:
        """Look *value* up among the options and report it to ``on_change``.

        An unknown value is reported as ``None``.
        """
        option = self.config.find(value)
        if self.on_change is not None:
            self.on_change(option)
        return option

    def render(self, env: Environment | None = None) -> Markup:
        selected = self.value.value if self.value is not None else ""
        return render_template(
            env,
            "wren/dropdown.html",
            {
                "name": self.config.name,
                "label": self.config.label,
                "options": [
                    _OptionView(i, o.label, o.value, o.value == selected, "")
                    for i, o in enumerate(self.config.options)
                ],
            },
        )


class CustomDropdown:
    """Listbox dropdown with open/closed and hover state.

    ``outside_click()`` closes it, the same as a document-level click
    handler registered while the component is mounted.
    """

    __slots__ = ("config", "hovered_value", "is_open", "on_change", "value")

    def __init__(
        self,
        config: DropdownConfig,
        value: Option | None = None,
        on_change: ChangeHandler | None = None,
    ) -> None:
        self.config = config
        self.value = value
        self.on_change = on_change
        self.is_open = False
        self.hovered_value: str | None = None

    @property
    def dropdown_id(self) -> str:
        return f"dropdown-{self.config.name}"

    @property
    def listbox_id(self) -> str:
        return f"listbox-{self.config.name}"

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def hover(self, option: Option | None) -> None:
        self.hovered_value = option.value if option is not None else None

    def choose(self, option: Option, event: ActivationEvent | None = None) -> None:
        if event is not None:
            event.stop_propagation()
        self.value = option
        self.is_open = False
        if self.on_change is not None:
            self.on_change(option)

    def outside_click(self) -> None:
        self.is_open = False

    def _option_class(self, option: Option) -> str:
        if self.hovered_value == option.value:
            return "cursor-pointer p-2 bg-blue-200"
        if self.value is not None and self.value.value == option.value:
            return "cursor-pointer p-2 bg-green-200"
        return "cursor-pointer p-2"

    def render(self, env: Environment | None = None) -> Markup:
        selected = self.value.value if self.value is not None else None
        return render_template(
            env,
            "wren/custom_dropdown.html",
            {
                "dropdown_id": self.dropdown_id,
                "listbox_id": self.listbox_id,
                "label": self.config.label,
                "display": self.value.label if self.value is not None else self.config.label,
                "is_open": self.is_open,
                "options": [
                    _OptionView(i, o.label, o.value, o.value == selected, self._option_class(o))
                    for i, o in enumerate(self.config.options)
                ],
            },
        )
