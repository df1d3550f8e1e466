"""Secure message API endpoints (JSON)."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

import structlog

from filelocker.api.envelope import JSON
from filelocker.api.http_client import HttpClient
from filelocker.exceptions import DecodeError
from filelocker.models.messages import SecureMessage
from filelocker.models.responses import MessageCountResponse, MessagesResponse, StatusResponse

logger = structlog.get_logger(__name__)

LIST_ENDPOINT = "/message/get_messages"
COUNT_ENDPOINT = "/message/get_new_message_count"
READ_ENDPOINT = "/message/read_message"
CREATE_ENDPOINT = "/message/create_message"
DELETE_ENDPOINT = "/message/delete_messages"

EXPIRATION_FORMAT = "%m/%d/%Y"


def list_messages(http: HttpClient) -> MessagesResponse:
    """
    List the user's secure messages.

    The payload is a list of single-message groups; the grouping is kept
    as-is because callers index into it positionally.

    Raises:
        RemoteError: If Filelocker reported errors.
    """
    envelope = http.request(LIST_ENDPOINT, JSON)
    envelope.raise_for_errors("listing secure messages", endpoint=LIST_ENDPOINT)

    return MessagesResponse(
        message_groups=_decode_message_groups(envelope.payload),
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )


def count_new_messages(http: HttpClient) -> MessageCountResponse:
    """Get the number of unread secure messages."""
    envelope = http.request(COUNT_ENDPOINT, JSON)
    envelope.raise_for_errors("counting new secure messages", endpoint=COUNT_ENDPOINT)

    count = envelope.payload if envelope.payload is not None else 0
    if not isinstance(count, int) or isinstance(count, bool):
        msg = f"Expected an integer message count, got {count!r}"
        raise DecodeError(msg, endpoint=COUNT_ENDPOINT)

    return MessageCountResponse(
        count=count,
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )


def mark_message_read(http: HttpClient, message_id: int) -> StatusResponse:
    """Mark a secure message as read."""
    envelope = http.request(READ_ENDPOINT, JSON, data={"messageId": str(message_id)})
    envelope.raise_for_errors("marking secure message as read", endpoint=READ_ENDPOINT)
    return StatusResponse(
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )


def send_message(
    http: HttpClient,
    subject: str,
    body: str,
    recipient_ids: Iterable[str],
    expire_at: datetime,
) -> StatusResponse:
    """
    Send a new secure message.

    Args:
        http: Logged-in HTTP client.
        subject: Message subject.
        body: Message body.
        recipient_ids: Filelocker user ids of the recipients.
        expire_at: Expiration; only the date part is sent, as MM/DD/YYYY.

    Raises:
        AuthenticationError: If the client has no request origin.
        RemoteError: If Filelocker reported errors.
    """
    envelope = http.request(
        CREATE_ENDPOINT,
        JSON,
        data={
            "requestOrigin": http.require_origin(),
            "subject": subject,
            "body": body,
            "expiration": expire_at.strftime(EXPIRATION_FORMAT),
            "recipientIds": ",".join(recipient_ids),
        },
    )
    envelope.raise_for_errors("sending secure message", endpoint=CREATE_ENDPOINT)
    return StatusResponse(
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )


def delete_messages(http: HttpClient, message_ids: Iterable[int]) -> StatusResponse:
    """
    Delete secure messages by id.

    Raises:
        AuthenticationError: If the client has no request origin.
        RemoteError: If Filelocker reported errors.
    """
    envelope = http.request(
        DELETE_ENDPOINT,
        JSON,
        data={
            "messageIds": ",".join(str(i) for i in message_ids),
            "requestOrigin": http.require_origin(),
        },
    )
    envelope.raise_for_errors("deleting secure messages", endpoint=DELETE_ENDPOINT)
    return StatusResponse(
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )


def _decode_message_groups(data: Any) -> tuple[tuple[SecureMessage, ...], ...]:
    if data is None:
        return ()
    try:
        if not isinstance(data, list) or not all(isinstance(group, list) for group in data):
            msg = "Expected a list of message groups"
            raise TypeError(msg)
        return tuple(tuple(SecureMessage.from_api(m) for m in group) for group in data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        msg = f"Invalid secure message payload: {e}"
        raise DecodeError(msg, endpoint=LIST_ENDPOINT) from e
