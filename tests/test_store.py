"""Tests for wren.navigation.store — the observable path holder."""

import pytest

from wren.errors import NavigationError
from wren.navigation.history import MemoryHistory
from wren.navigation.store import PathStore
from wren.testing import PathRecorder


class TestPathStoreInit:
    def test_initial_path(self) -> None:
        store = PathStore("/table")
        assert store.current_path == "/table"

    def test_from_history_reads_location(self) -> None:
        history = MemoryHistory("/accordion")
        store = PathStore.from_history(history)
        assert store.current_path == "/accordion"

    def test_rejects_non_string_path(self) -> None:
        with pytest.raises(NavigationError, match="str path"):
            PathStore(42)  # type: ignore[arg-type]


class TestPathStoreSet:
    def test_set_updates_and_notifies(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        store.subscribe(recorder)

        assert store.set("/a") is True
        assert store.current_path == "/a"
        assert recorder.paths == ["/a"]

    def test_set_same_path_is_noop(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        store.subscribe(recorder)

        assert store.set("/") is False
        assert recorder.paths == []

    def test_no_normalization(self) -> None:
        store = PathStore("/a")
        assert store.set("/a/") is True
        assert store.current_path == "/a/"

    def test_subscribers_see_new_path_before_return(self) -> None:
        store = PathStore("/")
        seen: list[str] = []
        store.subscribe(lambda _path: seen.append(store.current_path))

        store.set("/x")
        assert seen == ["/x"]

    def test_subscribers_notified_in_order(self) -> None:
        store = PathStore("/")
        calls: list[str] = []
        store.subscribe(lambda p: calls.append("first"))
        store.subscribe(lambda p: calls.append("second"))

        store.set("/x")
        assert calls == ["first", "second"]

    def test_subscriber_exception_propagates(self) -> None:
        store = PathStore("/")

        def boom(path: str) -> None:
            raise RuntimeError("subscriber failed")

        store.subscribe(boom)
        with pytest.raises(RuntimeError, match="subscriber failed"):
            store.set("/x")
        assert store.current_path == "/x"


class TestPathStoreSubscription:
    def test_unsubscribe_stops_notifications(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        unsubscribe = store.subscribe(recorder)

        store.set("/a")
        unsubscribe()
        store.set("/b")
        assert recorder.paths == ["/a"]
        assert store.subscriber_count == 0

    def test_double_unsubscribe_is_noop(self) -> None:
        store = PathStore("/")
        unsubscribe = store.subscribe(PathRecorder())
        unsubscribe()
        unsubscribe()
        assert store.subscriber_count == 0

    def test_unsubscribe_by_callback_is_idempotent(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        store.subscribe(recorder)

        store.unsubscribe(recorder)
        store.unsubscribe(recorder)
        assert store.subscriber_count == 0

    def test_handle_release_does_not_remove_other_registration(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        first = store.subscribe(recorder)
        store.subscribe(recorder)

        first()
        first()
        assert store.subscriber_count == 1

    def test_subscriber_can_unsubscribe_during_notification(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        handles: list = []

        def once(path: str) -> None:
            handles[0]()

        handles.append(store.subscribe(once))
        store.subscribe(recorder)

        store.set("/a")
        store.set("/b")
        assert recorder.paths == ["/a", "/b"]
        assert store.subscriber_count == 1

    def test_subscription_context_releases_on_exit(self) -> None:
        store = PathStore("/")
        recorder = PathRecorder()
        with store.subscription(recorder):
            store.set("/a")
            assert store.subscriber_count == 1
        assert store.subscriber_count == 0

    def test_subscription_context_releases_on_error(self) -> None:
        store = PathStore("/")
        with pytest.raises(ValueError), store.subscription(PathRecorder()):
            raise ValueError("teardown path")
        assert store.subscriber_count == 0
