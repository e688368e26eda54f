"""Platform history protocol and an in-process implementation.

``PlatformHistory`` is the narrow surface wren needs from a browser-like
history: read the location, push an entry, and hear about back/forward.

``MemoryHistory`` models ``window.history`` semantics without a browser:

- ``push_state()`` drops any forward entries, appends, and does **not**
  fire pop listeners.
- ``back()`` / ``forward()`` / ``go()`` move the cursor and fire pop
  listeners. Moves past either end are silent no-ops.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger("wren.navigation")

PopListener = Callable[[], None]


@runtime_checkable
class PlatformHistory(Protocol):
    """What the navigation core reads from and writes to."""

    @property
    def location(self) -> str: ...

    @property
    def length(self) -> int: ...

    def push_state(self, url: str, state: Any = None) -> None: ...

    def add_pop_listener(self, listener: PopListener) -> None: ...

    def remove_pop_listener(self, listener: PopListener) -> None: ...


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One slot in the history stack."""

    url: str
    state: Any = None


class MemoryHistory:
    """Browser-style history stack held in memory.

    Usage::

        history = MemoryHistory("/")
        history.push_state("/table")
        history.back()
        assert history.location == "/"
    """

    __slots__ = ("_entries", "_index", "_listeners")

    def __init__(self, initial_url: str = "/") -> None:
        self._entries: list[HistoryEntry] = [HistoryEntry(initial_url)]
        self._index: int = 0
        self._listeners: list[PopListener] = []

    @property
    def location(self) -> str:
        return self._entries[self._index].url

    @property
    def state(self) -> Any:
        return self._entries[self._index].state

    @property
    def length(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def push_state(self, url: str, state: Any = None) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(HistoryEntry(url, state))
        self._index = len(self._entries) - 1

    def replace_state(self, url: str, state: Any = None) -> None:
        self._entries[self._index] = HistoryEntry(url, state)

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        """Move the cursor by *delta* entries and fire pop listeners.

        Out-of-range moves and ``go(0)`` do nothing.
        """
        target = self._index + delta
        if delta == 0 or not 0 <= target < len(self._entries):
            return
        self._index = target
        logger.debug("history pop -> %r", self.location)
        for listener in tuple(self._listeners):
            listener()

    def add_pop_listener(self, listener: PopListener) -> None:
        self._listeners.append(listener)

    def remove_pop_listener(self, listener: PopListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def __repr__(self) -> str:
        return f"<MemoryHistory {self.location!r} {self._index + 1}/{len(self._entries)}>"
