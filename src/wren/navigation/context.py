"""Navigation context and its provider.

There is no module-level navigation singleton. A ``NavigationProvider``
owns one ``PathStore`` and one ``HistoryBridge``; components receive a
``NavigationContext`` handle from it and never reach for global state.
Tests build a fresh provider per test case.

Lifecycle::

    with NavigationProvider(MemoryHistory("/")) as nav:
        ctx = nav.context()
        ctx.navigate("/table")
    # pop listener released here, even if the block raised
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from types import TracebackType

from wren._internal.types import Path, Subscriber, Unsubscribe
from wren.navigation.bridge import HistoryBridge
from wren.navigation.history import MemoryHistory, PlatformHistory
from wren.navigation.store import PathStore

logger = logging.getLogger("wren.navigation")


@dataclass(frozen=True, slots=True)
class NavigationContext:
    """What a consumer sees: the path at render time and a way to move.

    A snapshot. Re-read it from the provider after navigation; the
    ``navigate`` callable always targets the live store.
    """

    current_path: Path
    navigate: Callable[[Path], bool]

    def is_current(self, path: Path) -> bool:
        return path == self.current_path


class NavigationProvider:
    """Owns the path store, the history bridge, and the pop listener.

    ``start()`` attaches the platform listener and ``stop()`` releases it.
    Subscriptions taken through ``subscribe()`` while started are
    released by ``stop()`` as well, since consumer teardown order is not
    guaranteed. A subscription released early is dropped from the provider
    at once.
    """

    __slots__ = ("_owned", "bridge", "history", "store")

    def __init__(self, history: PlatformHistory | None = None, *, initial_path: Path = "/") -> None:
        self.history: PlatformHistory = history if history is not None else MemoryHistory(initial_path)
        self.store = PathStore.from_history(self.history)
        self.bridge = HistoryBridge(self.store, self.history)
        self._owned: list[Unsubscribe] = []

    @property
    def current_path(self) -> Path:
        return self.store.current_path

    @property
    def started(self) -> bool:
        return self.bridge.attached

    @property
    def owned_count(self) -> int:
        """Subscriptions taken through ``subscribe()`` and not yet released."""
        return len(self._owned)

    def navigate(self, to: Path) -> bool:
        return self.bridge.navigate(to)

    def context(self) -> NavigationContext:
        return NavigationContext(current_path=self.store.current_path, navigate=self.navigate)

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Subscribe to path changes; released at ``stop()`` at the latest."""
        release = self.store.subscribe(callback)

        def unsubscribe() -> None:
            release()
            if unsubscribe in self._owned:
                self._owned.remove(unsubscribe)

        self._owned.append(unsubscribe)
        return unsubscribe

    @contextmanager
    def subscription(self, callback: Subscriber) -> Iterator[Unsubscribe]:
        with self.store.subscription(callback) as unsubscribe:
            yield unsubscribe

    def start(self) -> None:
        if self.bridge.attached:
            return
        self.bridge.attach()
        logger.debug("navigation provider started at %r", self.store.current_path)

    def stop(self) -> None:
        owned, self._owned = self._owned, []
        for unsubscribe in owned:
            unsubscribe()
        if self.bridge.attached:
            self.bridge.detach()
            logger.debug("navigation provider stopped at %r", self.store.current_path)

    def __enter__(self) -> NavigationProvider:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "started" if self.started else "stopped"
        return f"<NavigationProvider {self.store.current_path!r} {state}>"
