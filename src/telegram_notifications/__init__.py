"""Telegram notification messages - payload builders for the Telegram Bot API.

Builds sendDocument/sendPhoto/... and sendPoll requests for a notification
system and hands them to an injected sender, which owns the transport.

Components:
- messages: TelegramFile and TelegramPoll builders
- sender: the interface a transport must implement
- templates: caption templates
- config / log: settings and logging setup
"""
from .enums import ParseMode
from .exceptions import (
    AttachmentReadError,
    CouldNotSendNotification,
    SenderNotConfigured,
    TelegramNotificationError,
    TemplateNotFound,
)
from .messages import TelegramBase, TelegramFile, TelegramPoll
from .sender import TelegramSender

__all__ = [
    'ParseMode',
    'AttachmentReadError',
    'CouldNotSendNotification',
    'SenderNotConfigured',
    'TelegramNotificationError',
    'TemplateNotFound',
    'TelegramBase',
    'TelegramFile',
    'TelegramPoll',
    'TelegramSender',
]
