"""Navigation — path store, history bridge, and the provider that owns them.

Navigation is synchronous: ``navigate()`` pushes one history entry,
updates the store, and notifies every subscriber before it returns.
"""

from wren.navigation.bridge import HistoryBridge
from wren.navigation.context import NavigationContext, NavigationProvider
from wren.navigation.history import HistoryEntry, MemoryHistory, PlatformHistory
from wren.navigation.store import PathStore

__all__ = [
    "HistoryBridge",
    "HistoryEntry",
    "MemoryHistory",
    "NavigationContext",
    "NavigationProvider",
    "PathStore",
    "PlatformHistory",
]
