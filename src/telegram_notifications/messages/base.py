"""Shared payload container for Telegram message builders.

Holds the request fields, parse mode, inline keyboard and the injected sender.
Subclasses add their own fields and implement send().
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from ..config import get_settings
from ..enums import ParseMode
from ..exceptions import SenderNotConfigured
from ..sender import TelegramSender


class TelegramBase:
    def __init__(self, sender: Optional[TelegramSender] = None):
        self.payload: Dict[str, Any] = {}
        self.telegram: Optional[TelegramSender] = sender
        self._token: Optional[str] = None
        self._buttons: List[Dict[str, str]] = []
        self._button_columns: int = 2
        self._send_condition: bool = True

    def using(self, sender: TelegramSender):
        self.telegram = sender
        return self

    def to(self, chat_id: Union[int, str]):
        """Recipient's chat id."""
        self.payload["chat_id"] = chat_id
        return self

    def token(self, token: str):
        """Bot token for this message only; overrides TELEGRAM_BOT_TOKEN."""
        self._token = token
        return self

    def get_token(self) -> Optional[str]:
        return self._token or get_settings().TELEGRAM_BOT_TOKEN

    def has_token(self) -> bool:
        return bool(self.get_token())

    def parse_mode(self, mode: Union[ParseMode, str, None] = None):
        if mode is None:
            self.payload.pop("parse_mode", None)
        else:
            self.payload["parse_mode"] = ParseMode(mode).value
        return self

    def normal(self):
        """Send as plain text, without any parse mode."""
        return self.parse_mode(None)

    def disable_notification(self, disable: bool = True):
        self.payload["disable_notification"] = disable
        return self

    def options(self, options: Dict[str, Any]):
        """Extra Bot API parameters, merged into the payload as-is."""
        self.payload.update(options)
        return self

    def button(self, text: str, url: str, columns: int = 2):
        """
        Add an inline URL button. Buttons are laid out in rows of `columns`;
        the last call decides the row width.
        """
        self._buttons.append({"text": text, "url": url})
        self._button_columns = max(columns, 1)
        rows = [
            self._buttons[i:i + self._button_columns]
            for i in range(0, len(self._buttons), self._button_columns)
        ]
        self.payload["reply_markup"] = json.dumps({"inline_keyboard": rows})
        return self

    def send_when(self, condition: bool):
        self._send_condition = bool(condition)
        return self

    def can_send(self) -> bool:
        return self._send_condition

    def get_payload_value(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.payload)

    def _require_sender(self) -> TelegramSender:
        if self.telegram is None:
            raise SenderNotConfigured(
                f"{type(self).__name__} has no sender; pass one to the constructor or call using()"
            )
        return self.telegram

    def send(self):
        raise NotImplementedError
