"""
Filelocker client facade.

This is the main entry point for users of the library. It logs in once and
then exposes every file, group and secure message operation as a method.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, BinaryIO, Self

import httpx
import structlog

from filelocker.api.endpoints import auth, files, groups, messages
from filelocker.api.http_client import HttpClient
from filelocker.config import FilelockerConfig
from filelocker.models.responses import (
    FilesResponse,
    GroupsResponse,
    MessageCountResponse,
    MessagesResponse,
    StatusResponse,
    UploadResponse,
)

logger = structlog.get_logger(__name__)


class FilelockerClient:
    """
    Client for the Filelocker 2 "API".

    Instances are created by :meth:`login`, which returns a ready session or
    raises. Each method performs exactly one blocking request; nothing is
    retried or cached.

    Example:
        ```python
        config = FilelockerConfig(base_url="https://files.yale.edu")
        with FilelockerClient.login("netid", "api-key", config) as client:
            for f in client.list_files().files:
                print(f.name, f.size)

            count = client.count_new_messages().count
        ```
    """

    def __init__(self, http: HttpClient) -> None:
        """
        Wrap an already logged-in HTTP client. Prefer :meth:`login`.

        Args:
            http: HTTP client holding the session cookies and origin.
        """
        self._http = http

    @classmethod
    def login(
        cls,
        user_id: str,
        api_key: str,
        config: FilelockerConfig | str,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> Self:
        """
        Log in and return a ready client.

        Args:
            user_id: Filelocker user id.
            api_key: CLI key generated in the Filelocker web UI.
            config: Client configuration, or just the base URL.
            transport: Optional httpx transport for testing.

        Returns:
            Logged-in client.

        Raises:
            ConfigurationError: If the base URL is malformed (no request is made).
            TransportError: If the service cannot be reached.
            DecodeError: If the login response is not well-formed XML.
            LoginRejectedError: If Filelocker reported login errors.
            MissingOriginError: If no request origin was returned.
        """
        if isinstance(config, str):
            config = FilelockerConfig(base_url=config)

        http = HttpClient(config, transport=transport)
        try:
            auth.login(http, user_id, api_key)
        except BaseException:
            http.close()
            raise
        logger.debug("Session established", base_url=config.base_url)
        return cls(http)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._http.close()

    @property
    def origin(self) -> str | None:
        """Request origin token returned at login."""
        return self._http.origin

    @property
    def base_url(self) -> str:
        return self._http.config.base_url

    # Files

    def list_files(self) -> FilesResponse:
        """List the user's files."""
        return files.list_files(self._http)

    def upload_file(
        self,
        name: str,
        content: bytes | BinaryIO,
        *,
        notes: str = "",
        scan: bool = False,
    ) -> UploadResponse:
        """
        Upload a file.

        Args:
            name: File name shown in Filelocker.
            content: File bytes or binary file object (read fully into memory).
            notes: Optional file notes.
            scan: Request a virus scan.
        """
        return files.upload_file(self._http, name, content, notes=notes, scan=scan)

    def delete_files(self, file_ids: Iterable[str]) -> StatusResponse:
        """Delete files by id."""
        return files.delete_files(self._http, list(file_ids))

    # Groups

    def list_groups(self) -> GroupsResponse:
        """List the user's groups."""
        return groups.list_groups(self._http)

    # Secure messages

    def list_messages(self) -> MessagesResponse:
        """List secure messages, grouped exactly as the service returns them."""
        return messages.list_messages(self._http)

    def count_new_messages(self) -> MessageCountResponse:
        """Count unread secure messages."""
        return messages.count_new_messages(self._http)

    def mark_message_read(self, message_id: int) -> StatusResponse:
        """Mark one secure message as read."""
        return messages.mark_message_read(self._http, message_id)

    def send_message(
        self,
        subject: str,
        body: str,
        recipient_ids: Iterable[str],
        expire_at: datetime,
    ) -> StatusResponse:
        """
        Send a secure message.

        Args:
            subject: Message subject.
            body: Message body.
            recipient_ids: Recipient user ids.
            expire_at: When the message expires (sent as MM/DD/YYYY).
        """
        return messages.send_message(self._http, subject, body, recipient_ids, expire_at)

    def delete_messages(self, message_ids: Iterable[int]) -> StatusResponse:
        """Delete secure messages by id."""
        return messages.delete_messages(self._http, message_ids)
