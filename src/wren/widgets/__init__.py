"""Presentational widgets with simple controlled state."""

from wren.widgets.accordion import Accordion, AccordionItem
from wren.widgets.button import Button
from wren.widgets.counter import Counter, CounterAction, CounterState, reduce_counter
from wren.widgets.dropdown import CustomDropdown, Dropdown, DropdownConfig, Option
from wren.widgets.modal import Modal, ScrollLock
from wren.widgets.panel import Panel

__all__ = [
    "Accordion",
    "AccordionItem",
    "Button",
    "Counter",
    "CounterAction",
    "CounterState",
    "CustomDropdown",
    "Dropdown",
    "DropdownConfig",
    "Modal",
    "Option",
    "Panel",
    "ScrollLock",
    "reduce_counter",
]
