"""Side channel for user-facing notifications.

Stores report every outcome through their return value and, in parallel,
publish a :class:`~cinevault.models.notification.Notification` here for the
presentation layer to display.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from cinevault.models.notification import Notification

_logger = logging.getLogger(__name__)

NotificationCallback = Callable[[Notification], None]


class Notifier:
    """Fan notifications out to subscribers and keep a short history.

    A subscriber that raises is logged and skipped; it never breaks the
    store operation that emitted the notification.
    """

    def __init__(self, *, history: int = 50) -> None:
        self._subscribers: list[NotificationCallback] = []
        self._recent: deque[Notification] = deque(maxlen=history)

    def subscribe(self, callback: NotificationCallback) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def emit(self, notification: Notification) -> None:
        self._recent.append(notification)
        _logger.debug("Notification level=%s message=%s", notification.level, notification.message)
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                _logger.debug("Notification callback failed", exc_info=True)

    @property
    def recent(self) -> tuple[Notification, ...]:
        return tuple(self._recent)

    @property
    def last(self) -> Notification | None:
        return self._recent[-1] if self._recent else None

    def clear(self) -> None:
        self._recent.clear()
