"""
Filelocker exception hierarchy.

All exceptions inherit from FilelockerError for easy catching.
"""

from typing import Any


class FilelockerError(Exception):
    """Base exception for all filelocker errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(FilelockerError):
    """Invalid client or CLI configuration (bad URL, duration, config file)."""


class TransportError(FilelockerError):
    """Network-level error (connection failed, DNS, timeout)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint


class DecodeError(FilelockerError):
    """Response body was not well-formed XML or JSON."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint


class AuthenticationError(FilelockerError):
    """Login failed or the session has no request origin."""


class MissingOriginError(AuthenticationError):
    """Login response carried no informational message to use as origin."""


class LoginRejectedError(AuthenticationError):
    """Filelocker reported errors for the login request."""

    def __init__(self, message: str, *, error_messages: tuple[str, ...]) -> None:
        super().__init__(message, error_messages=list(error_messages))
        self.error_messages = error_messages


class RemoteError(FilelockerError):
    """
    Filelocker returned a non-empty error message list.

    Attributes:
        endpoint: Endpoint that reported the error.
        error_messages: Error messages from the response envelope.
        info_messages: Informational messages from the response envelope.
        response: Partially decoded response record, or None when the
            operation has no payload on failure.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        error_messages: tuple[str, ...],
        info_messages: tuple[str, ...] = (),
        response: Any = None,
    ) -> None:
        super().__init__(message, endpoint=endpoint, error_messages=list(error_messages))
        self.endpoint = endpoint
        self.error_messages = error_messages
        self.info_messages = info_messages
        self.response = response
