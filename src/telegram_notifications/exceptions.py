"""Error types raised while building or sending Telegram messages."""

from __future__ import annotations

from typing import Optional


class TelegramNotificationError(Exception):
    """Base error for this package."""


class CouldNotSendNotification(TelegramNotificationError):
    """Raised by a sender when the remote call fails.

    Builders never catch this; it reaches the caller unchanged.
    """

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        self.error_code = error_code
        super().__init__(message)

    @classmethod
    def telegram_responded_with_error(cls, error_code: int, description: str) -> "CouldNotSendNotification":
        return cls(f"Telegram responded with an error `{error_code} - {description}`", error_code=error_code)

    @classmethod
    def could_not_communicate(cls, message: str) -> "CouldNotSendNotification":
        return cls(f"The communication with Telegram failed. `{message}`")

    @classmethod
    def chat_id_not_provided(cls) -> "CouldNotSendNotification":
        return cls("Telegram notification chat ID was not provided. Please refer usage docs.")


class AttachmentReadError(TelegramNotificationError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read attachment {path!r}: {reason}")


class SenderNotConfigured(TelegramNotificationError):
    """Raised when send() is called on a message with no sender injected."""


class TemplateNotFound(TelegramNotificationError, FileNotFoundError):
    pass
