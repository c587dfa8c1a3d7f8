from enum import Enum


class ParseMode(str, Enum):
    """Text formatting modes understood by the Bot API."""

    Markdown = "Markdown"
    MarkdownV2 = "MarkdownV2"
    HTML = "HTML"
