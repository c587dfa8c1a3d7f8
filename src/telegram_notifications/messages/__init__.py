from .base import TelegramBase
from .file import TelegramFile
from .poll import TelegramPoll

__all__ = [
    'TelegramBase',
    'TelegramFile',
    'TelegramPoll',
]
