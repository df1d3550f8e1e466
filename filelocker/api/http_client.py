"""
HTTP client for the Filelocker "API".

Owns the httpx client, its cookie jar and the request origin token obtained
at login. Every call is a single blocking POST whose body is decoded into an
Envelope by the decoder the endpoint asks for.
"""

from typing import Any

import httpx
import structlog

from filelocker.api.envelope import Envelope, EnvelopeDecoder
from filelocker.config import FilelockerConfig
from filelocker.exceptions import AuthenticationError, DecodeError, TransportError

logger = structlog.get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

SENSITIVE_KEYS = frozenset({"CLIkey", "requestOrigin"})


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Args:
        data: Form fields or query parameters that may contain secrets.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    return {key: "***" if key in SENSITIVE_KEYS else value for key, value in data.items()}


class HttpClient:
    """Synchronous HTTP client holding the Filelocker session."""

    def __init__(
        self,
        config: FilelockerConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._origin: str | None = None
        # httpx keeps Set-Cookie values in this client's jar for later calls
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
            headers={"User-Agent": config.user_agent},
        )

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    @property
    def config(self) -> FilelockerConfig:
        return self._config

    @property
    def cookies(self) -> httpx.Cookies:
        """Session cookies set by the service."""
        return self._client.cookies

    @property
    def origin(self) -> str | None:
        """Request origin token returned at login."""
        return self._origin

    def set_origin(self, origin: str) -> None:
        """
        Store the request origin after a successful login.

        Note:
            Internal use only. Called by the login endpoint; the origin is
            written once and read-only afterwards.
        """
        if self._origin is not None:
            msg = "Request origin already set for this session"
            raise RuntimeError(msg)
        self._origin = origin

    def require_origin(self) -> str:
        """
        Return the origin for a state-mutating call.

        Raises:
            AuthenticationError: If the session never logged in.
        """
        if not self._origin:
            msg = "Not logged in: no request origin. Call FilelockerClient.login() first."
            raise AuthenticationError(msg)
        return self._origin

    def request(
        self,
        endpoint: str,
        decoder: EnvelopeDecoder,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str | bytes] | None = None,
    ) -> Envelope:
        """
        POST to an endpoint and decode the response envelope.

        The HTTP status is not inspected: Filelocker reports failures in the
        envelope's error list, which callers check.

        Args:
            endpoint: Path relative to the base URL (e.g. "/file/upload").
            decoder: Decoder for the endpoint's wire format.
            data: Form fields, sent url-encoded.
            params: Query parameters.
            content: Raw request body (mutually exclusive with data).
            headers: Extra headers; override the form Content-Type default.

        Returns:
            Decoded envelope.

        Raises:
            TransportError: If the request fails (network, timeout or content decoding).
            DecodeError: If the body is not well-formed.
        """
        request_headers: dict[str, str | bytes] = {
            "Content-Type": FORM_CONTENT_TYPE,
            "Accept": decoder.accept,
        }
        if headers:
            request_headers.update(headers)

        logger.debug(
            "Sending request",
            endpoint=endpoint,
            form=sanitize_for_log(data) if data else None,
            params=sanitize_for_log(params) if params else None,
        )

        try:
            response = self._client.post(
                endpoint,
                data=data,
                params=params,
                content=content,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            msg = f"Request failed: {e}"
            raise TransportError(msg, endpoint=endpoint) from e

        try:
            envelope = decoder.decode(response.content)
        except DecodeError as e:
            raise DecodeError(e.message, endpoint=endpoint) from e

        logger.debug(
            "Received response",
            endpoint=endpoint,
            status=response.status_code,
            info=len(envelope.info_messages),
            errors=len(envelope.error_messages),
        )
        if envelope.error_messages:
            logger.warning(
                "Filelocker reported errors", endpoint=endpoint, errors=envelope.error_messages
            )
        return envelope
