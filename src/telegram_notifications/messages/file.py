"""File messages: a caption plus one attachment.

An attachment is either a reference the Bot API already knows (file_id or
URL, sent as a plain field) or raw bytes to upload (sent as multipart).
"""

from __future__ import annotations

import os
from typing import Any, BinaryIO, Dict, List, Optional, Union

from .. import templates
from ..config import get_settings
from ..exceptions import AttachmentReadError
from ..log import get_logger
from ..sender import TelegramSender
from .base import TelegramBase

logger = get_logger("file")

FileInput = Union[str, bytes, bytearray, os.PathLike, BinaryIO]


class TelegramFile(TelegramBase):
    def __init__(self, content: str = "", sender: Optional[TelegramSender] = None):
        super().__init__(sender)
        self.type: str = "document"
        self.content(content)
        self.parse_mode(get_settings().TELEGRAM_FILE_PARSE_MODE or None)

    @classmethod
    def create(cls, content: str = "", sender: Optional[TelegramSender] = None) -> "TelegramFile":
        return cls(content, sender)

    def content(self, content: str):
        """Caption text. Length limits are left to the Bot API."""
        self.payload["caption"] = content
        return self

    def attach(self, file: FileInput, type: str, filename: Optional[str] = None):
        """
        Attach `file` as `type` (photo, document, ...).

        A string that is not a readable local file is sent as a reference
        under the `type` field. Anything else is uploaded: bytes and binary
        streams as given, paths read in full. A string that is both a valid
        file_id and an existing local path is uploaded.
        """
        if isinstance(file, str) and not self._is_readable_file(file):
            self._drop_attachment()
            self.type = type
            self.payload[type] = file
            logger.debug(f"Attached {type} by reference")
            return self

        contents = self._read_contents(file)
        self._drop_attachment()
        self.type = type
        self.payload["file"] = {"name": type, "contents": contents}
        if filename is not None:
            self.payload["file"]["filename"] = filename
        logger.debug(f"Attached {type} for upload")
        return self

    def photo(self, file: FileInput):
        return self.attach(file, "photo")

    def audio(self, file: FileInput):
        return self.attach(file, "audio")

    def document(self, file: FileInput, filename: Optional[str] = None):
        """Any file, sent as a document. `filename` overrides the upload name."""
        return self.attach(file, "document", filename)

    def video(self, file: FileInput):
        return self.attach(file, "video")

    def animation(self, file: FileInput):
        return self.attach(file, "animation")

    def voice(self, file: FileInput):
        return self.attach(file, "voice")

    def video_note(self, file: FileInput):
        return self.attach(file, "video_note")

    def view(self, template: str, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None):
        """Use a rendered caption template as the content."""
        return self.content(templates.render(template, data, merge_data))

    def has_attachment(self) -> bool:
        """True only for uploads; references travel as plain fields."""
        return "file" in self.payload

    def serialize(self) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        return self.to_multipart() if self.has_attachment() else dict(self.payload)

    def to_dict(self) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        return self.serialize()

    def to_multipart(self) -> List[Dict[str, Any]]:
        parts = []
        for name, contents in self.payload.items():
            if name == "file":
                parts.append(dict(contents))
            else:
                parts.append({"name": name, "contents": contents})
        return parts

    def send(self):
        """
        Hand the payload to the sender.
        CouldNotSendNotification from the sender is not caught.
        """
        if not self.can_send():
            logger.debug(f"Skipping {self.type}: send condition is false")
            return None

        sender = self._require_sender()
        params = self.serialize()
        multipart = self.has_attachment()
        logger.debug(f"Sending {self.type} ({'multipart' if multipart else 'fields'})")
        return sender.send_file(params, self.type, multipart)

    def _drop_attachment(self):
        self.payload.pop("file", None)
        self.payload.pop(self.type, None)

    @staticmethod
    def _is_readable_file(path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.R_OK)

    @staticmethod
    def _read_contents(file: FileInput):
        if isinstance(file, (bytes, bytearray)):
            return bytes(file)
        if hasattr(file, "read"):
            # Caller owns the stream; it is neither read nor closed here.
            return file
        if isinstance(file, (str, os.PathLike)):
            path = os.fspath(file)
            try:
                with open(path, "rb") as f:
                    return f.read()
            except OSError as e:
                raise AttachmentReadError(path, e.strerror or str(e)) from e
        raise TypeError(f"Unsupported attachment type: {type(file).__name__}")
