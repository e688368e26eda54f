"""Counter — a reducer over ``{count, value_to_add}`` state."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from kida import Environment
from kida.template import Markup

from wren.templating.integration import render_template


class CounterAction(StrEnum):
    INCREMENT = "increment-count"
    DECREMENT = "decrement-count"
    CHANGE = "handle-change"
    ADD_VALUE = "add-value-to-count"


@dataclass(frozen=True, slots=True)
class CounterState:
    count: int = 0
    value_to_add: str = ""


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def reduce_counter(state: CounterState, action: CounterAction | str, payload: Any = None) -> CounterState:
    """Return the next state. Unknown actions return *state* unchanged."""
    match action:
        case CounterAction.INCREMENT:
            return replace(state, count=state.count + 1)
        case CounterAction.DECREMENT:
            return replace(state, count=state.count - 1)
        case CounterAction.CHANGE:
            return replace(state, value_to_add=str(payload or ""))
        case CounterAction.ADD_VALUE:
            return CounterState(count=state.count + _parse_int(state.value_to_add), value_to_add="")
        case _:
            return state


class Counter:
    """Holds a ``CounterState`` and applies actions to it."""

    __slots__ = ("state",)

    def __init__(self, initial_count: int = 0) -> None:
        self.state = CounterState(count=initial_count)

    def dispatch(self, action: CounterAction | str, payload: Any = None) -> CounterState:
        self.state = reduce_counter(self.state, action, payload)
        return self.state

    def render(self, env: Environment | None = None) -> Markup:
        return render_template(
            env,
            "wren/counter.html",
            {"count": self.state.count, "value_to_add": self.state.value_to_add},
        )
