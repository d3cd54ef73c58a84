from __future__ import annotations

from cinevault.models.notification import Notification, NotificationLevel
from cinevault.notifications import Notifier


def test_subscribers_receive_notifications_until_unsubscribed() -> None:
    notifier = Notifier()
    received: list[Notification] = []
    unsubscribe = notifier.subscribe(received.append)

    notifier.emit(Notification.success("Cart cleared"))
    unsubscribe()
    notifier.emit(Notification.info("ignored"))

    assert [n.message for n in received] == ["Cart cleared"]
    assert notifier.last == Notification.info("ignored")


def test_history_is_bounded() -> None:
    notifier = Notifier(history=2)
    for i in range(3):
        notifier.emit(Notification.error(f"e{i}"))
    assert [n.message for n in notifier.recent] == ["e1", "e2"]
    assert all(n.level == NotificationLevel.ERROR for n in notifier.recent)
    notifier.clear()
    assert notifier.last is None


def test_failing_subscriber_does_not_block_others() -> None:
    notifier = Notifier()
    received: list[Notification] = []

    def _boom(notification: Notification) -> None:
        raise ValueError("nope")

    notifier.subscribe(_boom)
    notifier.subscribe(received.append)
    notifier.emit(Notification.success("ok"))

    assert len(received) == 1
