"""Observable holder for the current logical path.

The store is the single source of truth for "where the app is". It knows
nothing about the platform history; ``HistoryBridge`` decides when the
platform is pushed and when it is only read.

Subscribers are called synchronously, in subscription order, before
``set()`` returns. Notification iterates over a snapshot, so a subscriber
may unsubscribe itself (or others) while being notified.
"""

import contextlib
import logging
from collections.abc import Iterator

from wren._internal.types import Path, Subscriber, Unsubscribe
from wren.errors import NavigationError
from wren.navigation.history import PlatformHistory

logger = logging.getLogger("wren.navigation")


def check_path(path: object) -> Path:
    """Return *path* unchanged, or raise ``NavigationError`` if it is not a str."""
    if not isinstance(path, str):
        msg = f"Navigation target must be a str path, got {type(path).__name__}: {path!r}"
        raise NavigationError(msg)
    return path


class PathStore:
    """Current path plus its subscriber list.

    Usage::

        store = PathStore("/")
        unsubscribe = store.subscribe(lambda path: print("now at", path))
        store.set("/table")   # prints "now at /table"
        unsubscribe()
        unsubscribe()         # second call is a no-op
    """

    __slots__ = ("_current_path", "_subscribers")

    def __init__(self, initial_path: Path) -> None:
        self._current_path: Path = check_path(initial_path)
        self._subscribers: list[Subscriber] = []

    @classmethod
    def from_history(cls, history: PlatformHistory) -> PathStore:
        """Create a store seeded from the platform's current location."""
        return cls(history.location)

    @property
    def current_path(self) -> Path:
        return self._current_path

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set(self, path: Path) -> bool:
        """Replace the current path and notify every subscriber.

        Returns ``False`` (and notifies nobody) when *path* equals the
        current path. Subscriber exceptions propagate to the caller.
        """
        path = check_path(path)
        if path == self._current_path:
            return False
        previous = self._current_path
        self._current_path = path
        logger.debug("path %r -> %r (%d subscribers)", previous, path, len(self._subscribers))
        for callback in tuple(self._subscribers):
            callback(path)
        return True

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register *callback* and return an idempotent release function."""
        self._subscribers.append(callback)
        released = False

        def unsubscribe() -> None:
            nonlocal released
            if released:
                return
            released = True
            self._remove(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove *callback*. Removing an unknown callback is a no-op."""
        self._remove(callback)

    @contextlib.contextmanager
    def subscription(self, callback: Subscriber) -> Iterator[Unsubscribe]:
        """Hold a subscription for the duration of a ``with`` block.

        Released on every exit path, including exceptions.
        """
        unsubscribe = self.subscribe(callback)
        try:
            yield unsubscribe
        finally:
            unsubscribe()

    def _remove(self, callback: Subscriber) -> None:
        # Identity match, last registration first, so a callback that was
        # subscribed twice needs two releases.
        for i in range(len(self._subscribers) - 1, -1, -1):
            if self._subscribers[i] is callback:
                del self._subscribers[i]
                return

    def __repr__(self) -> str:
        return f"<PathStore {self._current_path!r} subscribers={len(self._subscribers)}>"
