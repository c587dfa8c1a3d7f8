from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..log import get_logger
from ..sender import TelegramSender
from .base import TelegramBase

logger = get_logger("poll")


class TelegramPoll(TelegramBase):
    def __init__(self, question: str = "", sender: Optional[TelegramSender] = None):
        super().__init__(sender)
        self.question(question)

    @classmethod
    def create(cls, question: str = "", sender: Optional[TelegramSender] = None) -> "TelegramPoll":
        return cls(question, sender)

    def question(self, question: str):
        self.payload["question"] = question
        return self

    def choices(self, choices: List[str]):
        """Poll answers, JSON-encoded into `options`. Count limits are left to the Bot API."""
        self.payload["options"] = json.dumps(list(choices), separators=(",", ":"), ensure_ascii=False)
        return self

    def serialize(self) -> Dict[str, Any]:
        return dict(self.payload)

    def send(self):
        if not self.can_send():
            logger.debug("Skipping poll: send condition is false")
            return None

        sender = self._require_sender()
        logger.debug("Sending poll")
        return sender.send_poll(self.serialize())
