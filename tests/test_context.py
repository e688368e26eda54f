"""Tests for wren.navigation.context — NavigationContext and NavigationProvider."""

import pytest

from wren.navigation.context import NavigationContext, NavigationProvider
from wren.navigation.history import MemoryHistory
from wren.testing import PathRecorder


@pytest.fixture
def history() -> MemoryHistory:
    return MemoryHistory("/")


@pytest.fixture
def nav(history: MemoryHistory) -> NavigationProvider:
    return NavigationProvider(history)


class TestNavigationContext:
    def test_snapshot_fields(self, nav: NavigationProvider) -> None:
        ctx = nav.context()
        assert ctx.current_path == "/"
        assert ctx.is_current("/")
        assert not ctx.is_current("/a")

    def test_navigate_targets_live_store(self, nav: NavigationProvider) -> None:
        ctx = nav.context()
        ctx.navigate("/a")
        assert nav.current_path == "/a"
        # The old snapshot is unchanged; re-read the context after navigating.
        assert ctx.current_path == "/"
        assert nav.context().current_path == "/a"

    def test_frozen(self, nav: NavigationProvider) -> None:
        ctx = nav.context()
        with pytest.raises(AttributeError):
            ctx.current_path = "/x"  # type: ignore[misc]

    def test_manual_context(self) -> None:
        calls: list[str] = []
        ctx = NavigationContext("/here", lambda to: calls.append(to) is None)
        ctx.navigate("/there")
        assert calls == ["/there"]


class TestNavigationProvider:
    def test_defaults_to_memory_history(self) -> None:
        nav = NavigationProvider(initial_path="/table")
        assert isinstance(nav.history, MemoryHistory)
        assert nav.current_path == "/table"

    def test_fresh_provider_per_instance(self) -> None:
        a = NavigationProvider()
        b = NavigationProvider()
        a.navigate("/a")
        assert b.current_path == "/"

    def test_start_stop_acquires_and_releases_listener(
        self, nav: NavigationProvider, history: MemoryHistory
    ) -> None:
        nav.start()
        assert nav.started
        assert history.listener_count == 1
        nav.stop()
        assert not nav.started
        assert history.listener_count == 0

    def test_stop_releases_owned_subscriptions(self, nav: NavigationProvider) -> None:
        nav.start()
        nav.subscribe(PathRecorder())
        nav.subscribe(PathRecorder())
        assert nav.store.subscriber_count == 2

        nav.stop()
        assert nav.store.subscriber_count == 0

    def test_released_subscriptions_are_forgotten(self, nav: NavigationProvider) -> None:
        nav.start()
        for _ in range(1000):
            nav.subscribe(PathRecorder())()
        assert nav.owned_count == 0
        assert nav.store.subscriber_count == 0

    def test_stop_releases_only_live_subscriptions(self, nav: NavigationProvider) -> None:
        nav.start()
        keep = PathRecorder()
        nav.subscribe(keep)
        nav.subscribe(PathRecorder())()
        assert nav.owned_count == 1
        nav.navigate("/a")
        nav.stop()
        assert nav.owned_count == 0
        assert keep.paths == ["/a"]

    def test_consumer_release_then_stop_is_safe(self, nav: NavigationProvider) -> None:
        unsubscribe = nav.subscribe(PathRecorder())
        unsubscribe()
        nav.stop()
        nav.stop()
        assert nav.store.subscriber_count == 0

    def test_context_manager_back_navigation(
        self, nav: NavigationProvider, history: MemoryHistory
    ) -> None:
        recorder = PathRecorder()
        with nav:
            nav.subscribe(recorder)
            nav.navigate("/a")
            history.back()
        assert recorder.paths == ["/a", "/"]
        assert history.listener_count == 0

    def test_context_manager_releases_on_error(
        self, nav: NavigationProvider, history: MemoryHistory
    ) -> None:
        with pytest.raises(KeyError), nav:
            nav.subscribe(PathRecorder())
            raise KeyError("boom")
        assert history.listener_count == 0
        assert nav.store.subscriber_count == 0

    def test_scoped_subscription(self, nav: NavigationProvider) -> None:
        recorder = PathRecorder()
        with nav.subscription(recorder):
            nav.navigate("/a")
        nav.navigate("/b")
        assert recorder.paths == ["/a"]
