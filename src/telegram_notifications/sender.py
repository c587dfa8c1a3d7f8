"""Sender interface consumed by the message builders.

The transport (HTTP client, retries, error classification) lives outside this
package; anything with these two methods can be injected into a message.
"""

from typing import Any, Dict, List, Protocol, Union

Params = Union[Dict[str, Any], List[Dict[str, Any]]]


class TelegramSender(Protocol):
    def send_file(self, params: Params, type: str, multipart: bool = False) -> Any:
        """
        Call the send<Type> endpoint for `type` (document, photo, ...).
        `params` is a list of multipart parts when `multipart` is True,
        otherwise a flat field mapping.
        Raises CouldNotSendNotification on failure.
        """
        ...

    def send_poll(self, params: Dict[str, Any]) -> Any:
        """Call sendPoll. Raises CouldNotSendNotification on failure."""
        ...
