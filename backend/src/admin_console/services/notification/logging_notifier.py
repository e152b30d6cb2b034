"""Notifier that logs messages and keeps a short history for the view."""

import logging
from collections import deque
from typing import Deque, List

from admin_console.services.notification.base import Notification, NotificationLevel, Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Logs every notification and buffers the latest ``history`` of them."""

    def __init__(self, history: int = 50) -> None:
        self._pending: Deque[Notification] = deque(maxlen=history)

    def notify(self, notification: Notification) -> None:
        if notification.level is NotificationLevel.ERROR:
            logger.error(notification.message)
        else:
            logger.info(notification.message)
        self._pending.append(notification)

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        notifications = list(self._pending)
        self._pending.clear()
        return notifications
