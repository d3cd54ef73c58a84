"""User-facing notification model."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notification(BaseModel):
    """A transient message for the presentation layer to display."""

    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    message: str
    description: str | None = None

    @classmethod
    def success(cls, message: str, description: str | None = None) -> Notification:
        return cls(level=NotificationLevel.SUCCESS, message=message, description=description)

    @classmethod
    def error(cls, message: str, description: str | None = None) -> Notification:
        return cls(level=NotificationLevel.ERROR, message=message, description=description)

    @classmethod
    def info(cls, message: str, description: str | None = None) -> Notification:
        return cls(level=NotificationLevel.INFO, message=message, description=description)
