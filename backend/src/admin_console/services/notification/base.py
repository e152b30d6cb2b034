"""Abstract base class for user notifications."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """A human-readable message for the console user."""

    level: NotificationLevel
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(ABC):
    """Abstract base class for surfacing success and failure messages."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver one notification."""
        pass

    def success(self, message: str) -> None:
        self.notify(Notification(level=NotificationLevel.SUCCESS, message=message))

    def error(self, message: str) -> None:
        self.notify(Notification(level=NotificationLevel.ERROR, message=message))

    def drain(self) -> List[Notification]:
        """Return and forget pending notifications, if this notifier keeps any."""
        return []
