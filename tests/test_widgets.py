"""Tests for wren.widgets — buttons, panels, accordion, dropdowns, modal, counter."""

import pytest
from kida.template import Markup

from wren.components.events import ActivationEvent
from wren.errors import ConfigurationError
from wren.widgets import (
    Accordion,
    AccordionItem,
    Button,
    Counter,
    CounterAction,
    CounterState,
    CustomDropdown,
    Dropdown,
    DropdownConfig,
    Modal,
    Option,
    Panel,
    ScrollLock,
    reduce_counter,
)

COLORS = DropdownConfig.build("color", "Select Color", [("Red", "red"), ("Blue", "blue")])


class TestButton:
    def test_filled_variant(self) -> None:
        classes = Button("Go", variant="primary").classes
        assert "bg-blue-500" in classes
        assert "text-white" in classes

    def test_outline_variant(self) -> None:
        classes = Button("Go", variant="danger", outline=True).classes
        assert "bg-white" in classes
        assert "text-red-500" in classes
        assert "bg-red-500" not in classes

    def test_rounded_and_extra_class(self) -> None:
        classes = Button("Go", rounded=True, class_name="mr-2").classes
        assert classes.startswith("mr-2 ")
        assert classes.endswith("rounded-full")

    def test_unknown_variant(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown button variant"):
            Button("Go", variant="purple")

    def test_render_escapes_label(self) -> None:
        html = Button("<Go>").render()
        assert html.startswith('<button type="button"')
        assert "<Go>" not in html


class TestPanel:
    def test_render(self) -> None:
        html = Panel(Markup("<p>Hi</p>"), class_name="mt-2", attrs={"id": "p1"}).render()
        assert 'id="p1"' in html
        assert "<p>Hi</p>" in html
        assert "mt-2" in html


class TestAccordion:
    @pytest.fixture
    def accordion(self) -> Accordion:
        return Accordion([AccordionItem("Q1", "A1"), AccordionItem("Q2", "A2")])

    def test_starts_collapsed(self, accordion: Accordion) -> None:
        assert not any(accordion.is_expanded(i) for i in range(2))
        assert "A1" not in accordion.render()

    def test_toggle_expands_one_at_a_time(self, accordion: Accordion) -> None:
        accordion.toggle(0)
        accordion.toggle(1)
        assert accordion.is_expanded(1)
        assert not accordion.is_expanded(0)
        html = accordion.render()
        assert "A2" in html
        assert "A1" not in html

    def test_toggle_again_collapses(self, accordion: Accordion) -> None:
        accordion.toggle(0)
        accordion.toggle(0)
        assert not accordion.is_expanded(0)

    def test_out_of_range(self, accordion: Accordion) -> None:
        with pytest.raises(IndexError):
            accordion.toggle(5)


class TestDropdown:
    def test_select_reports_option(self) -> None:
        seen: list[Option | None] = []
        dropdown = Dropdown(COLORS, on_change=seen.append)
        assert dropdown.select("blue") == Option("Blue", "blue")
        dropdown.select("teal")
        assert seen == [Option("Blue", "blue"), None]

    def test_render_marks_selected(self) -> None:
        html = Dropdown(COLORS, value=Option("Blue", "blue")).render()
        assert '<option value="blue" selected>' in html
        assert '<option value="red">' in html


class TestCustomDropdown:
    def test_toggle_and_outside_click(self) -> None:
        dropdown = CustomDropdown(COLORS)
        dropdown.toggle()
        assert dropdown.is_open
        assert 'role="listbox"' in dropdown.render()
        dropdown.outside_click()
        assert not dropdown.is_open
        assert 'role="listbox"' not in dropdown.render()

    def test_choose(self) -> None:
        seen: list[Option | None] = []
        dropdown = CustomDropdown(COLORS, on_change=seen.append)
        dropdown.toggle()
        event = ActivationEvent()

        dropdown.choose(Option("Red", "red"), event)

        assert event.propagation_stopped
        assert not dropdown.is_open
        assert dropdown.value == Option("Red", "red")
        assert seen == [Option("Red", "red")]
        assert "<span>Red</span>" in dropdown.render()

    def test_placeholder_is_label(self) -> None:
        assert "<span>Select Color</span>" in CustomDropdown(COLORS).render()

    def test_hover_highlight(self) -> None:
        dropdown = CustomDropdown(COLORS, value=Option("Red", "red"))
        dropdown.toggle()
        dropdown.hover(Option("Blue", "blue"))
        html = dropdown.render()
        assert "bg-blue-200" in html
        assert "bg-green-200" in html
        assert dropdown.listbox_id == "listbox-color"


class TestModal:
    def test_closed_renders_nothing(self) -> None:
        assert Modal("Body").render() == ""

    def test_open_close_manage_scroll_lock(self) -> None:
        lock = ScrollLock()
        modal = Modal("Body", lock=lock)
        modal.open()
        modal.open()
        assert lock.body_overflow == "hidden"
        assert 'role="dialog"' in modal.render()
        modal.close()
        assert lock.body_overflow == "auto"
        assert not lock.locked

    def test_nested_modals_share_lock(self) -> None:
        lock = ScrollLock()
        outer, inner = Modal("a", lock=lock), Modal("b", lock=lock)
        outer.open()
        inner.open()
        inner.close()
        assert lock.locked
        outer.close()
        assert not lock.locked

    def test_overlay_calls_on_close(self) -> None:
        modal = Modal("Body")
        modal.on_close = modal.close
        modal.open()
        modal.click_overlay()
        assert not modal.is_open


class TestCounter:
    def test_increment_decrement(self) -> None:
        counter = Counter(10)
        counter.dispatch(CounterAction.INCREMENT)
        counter.dispatch("decrement-count")
        counter.dispatch(CounterAction.DECREMENT)
        assert counter.state.count == 9

    def test_add_value(self) -> None:
        state = reduce_counter(CounterState(5), CounterAction.CHANGE, "7")
        state = reduce_counter(state, CounterAction.ADD_VALUE)
        assert state == CounterState(12, "")

    def test_add_unparseable_value(self) -> None:
        state = reduce_counter(CounterState(5, "abc"), CounterAction.ADD_VALUE)
        assert state == CounterState(5, "")

    def test_unknown_action(self) -> None:
        state = CounterState(3)
        assert reduce_counter(state, "reset") is state

    def test_render(self) -> None:
        assert "<span data-count>4</span>" in Counter(4).render()
