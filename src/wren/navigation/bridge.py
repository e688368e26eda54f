"""Two-way adapter between a PathStore and the platform history.

Two code paths update the store:

- ``navigate(to)`` pushes a platform entry, then sets the store.
- the pop listener reads the platform location and sets the store
  without pushing. This is the only path that updates state without a
  push; pushing here would duplicate forward entries.

The pop listener is the bridge's one external resource. ``attach()``
acquires it, ``detach()`` releases it; both are idempotent and the bridge
is a context manager.
"""

import logging
from types import TracebackType

from wren._internal.types import Path
from wren.navigation.history import PlatformHistory
from wren.navigation.store import PathStore, check_path

logger = logging.getLogger("wren.navigation")


class HistoryBridge:
    """Keeps a ``PathStore`` and a ``PlatformHistory`` in step."""

    __slots__ = ("_attached", "history", "store")

    def __init__(self, store: PathStore, history: PlatformHistory) -> None:
        self.store = store
        self.history = history
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def navigate(self, to: Path) -> bool:
        """Push *to* onto the platform history and make it current.

        Returns ``False`` without touching the history when *to* is
        already the current path. Every subscriber has seen the new path
        by the time this returns.
        """
        to = check_path(to)
        if to == self.store.current_path:
            logger.debug("navigate(%r) ignored: already current", to)
            return False
        logger.debug("navigate %r -> %r", self.store.current_path, to)
        self.history.push_state(to)
        self.store.set(to)
        return True

    def sync_from_platform(self) -> None:
        """Pop listener: adopt the platform location without pushing."""
        location = self.history.location
        logger.debug("back/forward -> %r", location)
        self.store.set(location)

    def attach(self) -> None:
        if self._attached:
            return
        self.history.add_pop_listener(self.sync_from_platform)
        self._attached = True
        logger.debug("pop listener attached")

    def detach(self) -> None:
        if not self._attached:
            return
        self.history.remove_pop_listener(self.sync_from_platform)
        self._attached = False
        logger.debug("pop listener detached")

    def __enter__(self) -> HistoryBridge:
        self.attach()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.detach()
