"""Tests for NotificationStore."""

import logging

import pytest

from toastqueue.notifications.notification_manager import (
    Notification,
    NotificationKind,
    StoreEvent,
)


class TestEnqueue:
    """Tests for inserting notifications."""

    def test_returns_unique_ids(self, store):
        ids = [store.enqueue("info", f"msg {i}") for i in range(50)]
        assert len(set(ids)) == 50

    def test_list_preserves_insertion_order(self, store):
        kinds = ["success", "warning", "error", "info", "success"]
        ids = [store.enqueue(kind, f"m{i}") for i, kind in enumerate(kinds)]
        snapshot = store.list()
        assert [n.id for n in snapshot] == ids
        assert [n.kind.value for n in snapshot] == kinds

    def test_fields_are_recorded(self, store):
        notification_id = store.enqueue(NotificationKind.ERROR, "Failed", 3000)
        notif = store.get(notification_id)
        assert notif.kind is NotificationKind.ERROR
        assert notif.message == "Failed"
        assert notif.auto_close_after == 3000
        assert notif.created_at.endswith("Z")

    def test_accepts_string_kind(self, store):
        notification_id = store.enqueue("warning", "Careful")
        assert store.get(notification_id).kind is NotificationKind.WARNING

    def test_rejects_unknown_kind(self, store):
        with pytest.raises(ValueError, match="Unknown notification kind"):
            store.enqueue("critical", "nope")
        assert len(store) == 0

    def test_ids_not_reused_after_dismiss(self, store):
        first = store.enqueue("info", "a")
        store.dismiss(first)
        second = store.enqueue("info", "b")
        assert second != first


class TestDismiss:
    """Tests for removing notifications."""

    def test_dismiss_twice_returns_true_then_false(self, store):
        notification_id = store.enqueue("success", "Saved")
        assert store.dismiss(notification_id) is True
        assert store.dismiss(notification_id) is False

    def test_dismiss_unknown_id_is_noop(self, store):
        store.enqueue("info", "keep")
        assert store.dismiss("notif_missing") is False
        assert len(store) == 1

    def test_dismiss_from_middle_keeps_order(self, store):
        a = store.enqueue("info", "a")
        b = store.enqueue("info", "b")
        c = store.enqueue("info", "c")
        store.dismiss(b)
        assert [n.id for n in store.list()] == [a, c]
        assert b not in store
        assert a in store


class TestSnapshot:
    """list() must not expose internal state."""

    def test_snapshot_is_a_copy(self, store):
        store.enqueue("info", "a")
        snapshot = store.list()
        snapshot.clear()
        assert len(store.list()) == 1

    def test_snapshot_unaffected_by_later_mutation(self, store):
        a = store.enqueue("info", "a")
        snapshot = store.list()
        store.dismiss(a)
        store.enqueue("info", "b")
        assert [n.message for n in snapshot] == ["a"]

    def test_notification_is_immutable(self, store):
        notif = store.get(store.enqueue("info", "a"))
        with pytest.raises(AttributeError):
            notif.message = "changed"


class TestListeners:
    """Tests for change listeners."""

    def test_listener_sees_add_and_remove(self, store):
        seen = []
        store.add_listener(lambda event, notif: seen.append((event, notif.message)))
        notification_id = store.enqueue("info", "hello")
        store.dismiss(notification_id)
        store.dismiss(notification_id)
        assert seen == [(StoreEvent.ADDED, "hello"), (StoreEvent.REMOVED, "hello")]

    def test_listener_observes_applied_state(self, store):
        sizes = []
        store.add_listener(lambda event, notif: sizes.append(len(store)))
        notification_id = store.enqueue("info", "a")
        store.dismiss(notification_id)
        assert sizes == [1, 0]

    def test_failing_listener_is_logged_and_contained(self, store, caplog):
        seen = []

        def boom(event, notif):
            raise RuntimeError("boom")

        store.add_listener(boom)
        store.add_listener(lambda event, notif: seen.append(event))
        with caplog.at_level(logging.ERROR):
            notification_id = store.enqueue("info", "a")
        assert notification_id in store
        assert seen == [StoreEvent.ADDED]
        assert "failed on added" in caplog.text

    def test_remove_listener(self, store):
        seen = []
        listener = lambda event, notif: seen.append(event)  # noqa: E731
        store.add_listener(listener)
        store.remove_listener(listener)
        store.remove_listener(listener)
        store.enqueue("info", "a")
        assert seen == []


class TestNotificationDict:
    def test_to_dict_and_back(self):
        notif = Notification(
            id="notif_1",
            kind=NotificationKind.WARNING,
            message="Check input",
            created_at="2026-01-01T00:00:00.000Z",
        )
        data = notif.to_dict()
        assert data["kind"] == "warning"
        assert data["auto_close_after"] is None
        assert Notification.from_dict(data) == notif
