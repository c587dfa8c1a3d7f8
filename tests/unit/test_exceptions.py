from telegram_notifications import (
    AttachmentReadError,
    CouldNotSendNotification,
    TelegramNotificationError,
    TemplateNotFound,
)


def test_could_not_send_messages():
    err = CouldNotSendNotification.telegram_responded_with_error(403, "Forbidden: bot was blocked by the user")

    assert err.error_code == 403
    assert "403 - Forbidden: bot was blocked by the user" in str(err)
    assert CouldNotSendNotification.could_not_communicate("connect timeout").error_code is None
    assert "chat ID" in str(CouldNotSendNotification.chat_id_not_provided())


def test_hierarchy():
    assert issubclass(CouldNotSendNotification, TelegramNotificationError)
    assert issubclass(AttachmentReadError, TelegramNotificationError)
    assert issubclass(TemplateNotFound, FileNotFoundError)

    err = AttachmentReadError("/tmp/x.pdf", "Permission denied")
    assert err.path == "/tmp/x.pdf"
    assert "Permission denied" in str(err)
