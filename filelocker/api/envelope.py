"""
Response envelope decoding.

Filelocker answers login, file and group calls with XML and secure message
calls with JSON. Both carry the same envelope: a list of informational
messages, a list of error messages and an optional ``data`` payload. Each
endpoint picks the decoder matching its wire format; the endpoint then maps
``Envelope.payload`` to domain models.
"""

import json
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from xml.etree import ElementTree

from filelocker.exceptions import DecodeError, RemoteError


@dataclass(frozen=True, slots=True)
class Envelope:
    """
    Decoded response envelope.

    Attributes:
        info_messages: Informational messages (``messages/info`` or ``sMessages``).
        error_messages: Error messages (``messages/error`` or ``fMessages``).
        payload: The ``data`` element (XML) or value (JSON), None if absent.
    """

    info_messages: tuple[str, ...]
    error_messages: tuple[str, ...]
    payload: Any = None

    @property
    def ok(self) -> bool:
        """A response fails whenever any error message is present."""
        return not self.error_messages

    def raise_for_errors(self, action: str, *, endpoint: str, response: Any = None) -> None:
        """
        Raise if the service reported any error message.

        Args:
            action: Short description of the failed operation ("listing files").
            endpoint: Endpoint the envelope came from.
            response: Partially decoded response record to attach, if any.

        Raises:
            RemoteError: If ``error_messages`` is non-empty.
        """
        if self.ok:
            return
        msg = f"Error {action}: " + "; ".join(self.error_messages)
        raise RemoteError(
            msg,
            endpoint=endpoint,
            error_messages=self.error_messages,
            info_messages=self.info_messages,
            response=response,
        )


@runtime_checkable
class EnvelopeDecoder(Protocol):
    """Decode capability for one wire format."""

    @property
    def accept(self) -> str:
        """Value sent in the Accept header."""
        ...

    def decode(self, body: bytes) -> Envelope:
        """
        Decode a raw response body.

        Raises:
            DecodeError: If the body is not well-formed.
        """
        ...


class XmlEnvelopeDecoder:
    """
    Decoder for ``text/xml`` responses::

        <cli_response>
            <messages><info>..</info><error>..</error></messages>
            <data>..</data>
        </cli_response>
    """

    accept = "text/xml"

    def decode(self, body: bytes) -> Envelope:
        # The service pads its documents with whitespace before the declaration
        try:
            root = ElementTree.fromstring(body.strip())
        except ElementTree.ParseError as e:
            msg = f"Malformed XML response: {e}"
            raise DecodeError(msg) from e

        return Envelope(
            info_messages=tuple(_text(el) for el in root.iterfind("messages/info")),
            error_messages=tuple(_text(el) for el in root.iterfind("messages/error")),
            payload=root.find("data"),
        )


class JsonEnvelopeDecoder:
    """Decoder for ``application/json`` responses (``sMessages``/``fMessages``/``data``)."""

    accept = "application/json"

    def decode(self, body: bytes) -> Envelope:
        try:
            data = json.loads(body)
        except ValueError as e:
            msg = f"Malformed JSON response: {e}"
            raise DecodeError(msg) from e

        if not isinstance(data, dict):
            msg = "JSON response is not an object"
            raise DecodeError(msg)

        return Envelope(
            info_messages=_string_list(data.get("sMessages")),
            error_messages=_string_list(data.get("fMessages")),
            payload=data.get("data"),
        )


XML = XmlEnvelopeDecoder()
JSON = JsonEnvelopeDecoder()


def _text(element: ElementTree.Element) -> str:
    return (element.text or "").strip()


def _string_list(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = f"Expected a list of messages, got {type(value).__name__}"
        raise DecodeError(msg)
    return tuple(str(item) for item in value)
