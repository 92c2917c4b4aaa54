"""Tests for one-shot completion notification."""

import pytest

from beacon_staging.completion import BroadcastState, CompletionBroadcaster


@pytest.fixture
def broadcaster() -> CompletionBroadcaster:
    return CompletionBroadcaster()


class TestCompletionBroadcaster:
    def test_open_at_creation(self, broadcaster):
        assert broadcaster.state == BroadcastState.OPEN
        assert not broadcaster.resolved
        assert len(broadcaster) == 0

    def test_resolve_calls_listener(self, broadcaster):
        received = []
        broadcaster.add(received.append)

        broadcaster.resolve(True)

        assert received == [True]
        assert broadcaster.resolved

    def test_removed_listener_not_called(self, broadcaster):
        received = []
        listener = received.append

        broadcaster.add(listener)
        broadcaster.remove(listener)
        broadcaster.resolve(True)

        assert received == []

    def test_remove_one_of_many(self, broadcaster):
        first, second = [], []
        broadcaster.add(first.append)
        broadcaster.add(second.append)

        broadcaster.remove(first.append)
        broadcaster.resolve(True)

        assert first == []
        assert second == [True]

    def test_resolve_only_once(self, broadcaster):
        first, second = [], []
        broadcaster.add(first.append)
        broadcaster.add(second.append)

        broadcaster.resolve(True)
        broadcaster.resolve(False)

        assert first == [True]
        assert second == [True]

    def test_registration_order(self, broadcaster):
        calls = []
        broadcaster.add(lambda v: calls.append(("a", v)))
        broadcaster.add(lambda v: calls.append(("b", v)))
        broadcaster.add(lambda v: calls.append(("c", v)))

        broadcaster.resolve(1)

        assert calls == [("a", 1), ("b", 1), ("c", 1)]

    def test_duplicate_registration_called_per_occurrence(self, broadcaster):
        received = []
        listener = received.append

        broadcaster.add(listener)
        broadcaster.add(listener)
        broadcaster.resolve("done")

        assert received == ["done", "done"]

    def test_remove_takes_one_occurrence(self, broadcaster):
        received = []
        listener = received.append

        broadcaster.add(listener)
        broadcaster.add(listener)
        broadcaster.remove(listener)
        broadcaster.resolve("done")

        assert received == ["done"]

    def test_remove_unknown_listener(self, broadcaster):
        broadcaster.remove(lambda v: None)
        assert len(broadcaster) == 0

    def test_contains(self, broadcaster):
        def listener(value):
            pass

        assert not broadcaster.contains(listener)
        broadcaster.add(listener)
        assert broadcaster.contains(listener)

    def test_listeners_cleared_after_resolve(self, broadcaster):
        broadcaster.add(lambda v: None)
        broadcaster.resolve(True)

        assert len(broadcaster) == 0

    def test_add_after_resolve_is_ignored(self, broadcaster):
        received = []
        broadcaster.resolve(True)

        broadcaster.add(received.append)
        broadcaster.resolve(True)

        assert received == []
        assert len(broadcaster) == 0

    def test_remove_after_resolve_is_ignored(self, broadcaster):
        received = []
        broadcaster.add(received.append)
        broadcaster.resolve(True)

        broadcaster.remove(received.append)

        assert received == [True]

    def test_listener_added_during_resolve_not_called(self, broadcaster):
        late = []

        def register_late(value):
            broadcaster.add(late.append)

        broadcaster.add(register_late)
        broadcaster.resolve(True)

        assert late == []

    def test_listener_error_propagates_and_stays_resolved(self, broadcaster):
        after = []

        def failing(value):
            raise RuntimeError("boom")

        broadcaster.add(failing)
        broadcaster.add(after.append)

        with pytest.raises(RuntimeError):
            broadcaster.resolve(True)

        assert broadcaster.resolved
        assert after == []

        broadcaster.resolve(True)
        assert after == []

    def test_instances_compared_by_identity(self):
        first, second = CompletionBroadcaster(), CompletionBroadcaster()

        assert first != second
        assert len({first, second}) == 2
