"""
Domain models for Filelocker.

These are immutable (frozen) dataclasses built fresh from each response.
"""

from filelocker.models.files import File, Group
from filelocker.models.messages import SecureMessage
from filelocker.models.responses import (
    FilesResponse,
    GroupsResponse,
    MessageCountResponse,
    MessagesResponse,
    StatusResponse,
    UploadResponse,
)

__all__ = [
    # Resources
    "File",
    "Group",
    "SecureMessage",
    # Responses
    "StatusResponse",
    "FilesResponse",
    "UploadResponse",
    "GroupsResponse",
    "MessagesResponse",
    "MessageCountResponse",
]
