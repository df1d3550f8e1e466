"""
Typed response records, one per operation.

Every record carries the service's informational and error message lists
alongside its payload.
"""

from dataclasses import dataclass

from filelocker.models.files import File, Group
from filelocker.models.messages import SecureMessage


@dataclass(frozen=True, kw_only=True)
class StatusResponse:
    """Response carrying only the message envelope (deletes, send, mark read)."""

    info_messages: tuple[str, ...] = ()
    error_messages: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.error_messages


@dataclass(frozen=True, kw_only=True)
class FilesResponse(StatusResponse):
    files: tuple[File, ...] = ()


@dataclass(frozen=True, kw_only=True)
class UploadResponse(StatusResponse):
    file: File | None = None


@dataclass(frozen=True, kw_only=True)
class GroupsResponse(StatusResponse):
    groups: tuple[Group, ...] = ()


@dataclass(frozen=True, kw_only=True)
class MessagesResponse(StatusResponse):
    """
    Secure message listing.

    The service wraps every message in its own single-element group;
    ``message_groups`` keeps that nesting exactly as received.
    """

    message_groups: tuple[tuple[SecureMessage, ...], ...] = ()

    @property
    def messages(self) -> tuple[SecureMessage, ...]:
        """All messages in group order, for display."""
        return tuple(m for group in self.message_groups for m in group)


@dataclass(frozen=True, kw_only=True)
class MessageCountResponse(StatusResponse):
    count: int = 0
