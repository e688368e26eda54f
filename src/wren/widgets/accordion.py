"""Accordion — a list of sections, at most one expanded."""

from collections.abc import Sequence
from dataclasses import dataclass

from kida import Environment
from kida.template import Markup

from wren.templating.integration import render_template

COLLAPSED = -1


@dataclass(frozen=True, slots=True)
class AccordionItem:
    label: str
    content: str | Markup


@dataclass(frozen=True, slots=True)
class _SectionView:
    index: int
    label: str
    content: str | Markup
    expanded: bool


class Accordion:
    """Expand/collapse state over a fixed list of items.

    ``toggle(i)`` expands item *i*, or collapses it when it is already
    the expanded one.
    """

    __slots__ = ("expanded_index", "items")

    def __init__(self, items: Sequence[AccordionItem]) -> None:
        self.items: tuple[AccordionItem, ...] = tuple(items)
        self.expanded_index: int = COLLAPSED

    def is_expanded(self, index: int) -> bool:
        return index == self.expanded_index

    def toggle(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            msg = f"Accordion has no item {index}"
            raise IndexError(msg)
        self.expanded_index = COLLAPSED if self.is_expanded(index) else index

    def render(self, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/accordion.html",
            {
                "sections": [
                    _SectionView(i, item.label, item.content, self.is_expanded(i))
                    for i, item in enumerate(self.items)
                ],
            },
        )
