"""
Filelocker Python Client.

A client library and CLI for the Filelocker 2 secure file and message locker.

Example:
    ```python
    from filelocker import FilelockerClient, FilelockerConfig

    config = FilelockerConfig(base_url="https://files.yale.edu")
    with FilelockerClient.login("netid", "api-key", config) as client:
        # List files
        for f in client.list_files().files:
            print(f.file_id, f.name)

        # Read secure messages
        for group in client.list_messages().message_groups:
            for message in group:
                print(message.subject)
    ```
"""

from filelocker.client import FilelockerClient
from filelocker.config import FilelockerConfig
from filelocker.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    FilelockerError,
    LoginRejectedError,
    MissingOriginError,
    RemoteError,
    TransportError,
)
from filelocker.models import (
    File,
    FilesResponse,
    Group,
    GroupsResponse,
    MessageCountResponse,
    MessagesResponse,
    SecureMessage,
    StatusResponse,
    UploadResponse,
)
from filelocker.version import __version__

__all__ = [
    "__version__",
    # Main client
    "FilelockerClient",
    "FilelockerConfig",
    # Models
    "File",
    "Group",
    "SecureMessage",
    "StatusResponse",
    "FilesResponse",
    "UploadResponse",
    "GroupsResponse",
    "MessagesResponse",
    "MessageCountResponse",
    # Exceptions
    "FilelockerError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "AuthenticationError",
    "MissingOriginError",
    "LoginRejectedError",
    "RemoteError",
]
