"""Authentication endpoint."""

import structlog

from filelocker.api.envelope import XML
from filelocker.api.http_client import HttpClient
from filelocker.exceptions import LoginRejectedError, MissingOriginError

logger = structlog.get_logger(__name__)

LOGIN_ENDPOINT = "/cli/CLI_login"


def login(http: HttpClient, user_id: str, api_key: str) -> str:
    """
    Establish a session and store its request origin on the client.

    The session cookie set by the response stays in the client's jar.

    Args:
        http: HTTP client that will own the session.
        user_id: Filelocker user id.
        api_key: CLI key generated in the Filelocker web UI.

    Returns:
        The request origin token (first informational message).

    Raises:
        LoginRejectedError: If Filelocker reported errors.
        MissingOriginError: If no informational message was returned.
    """
    envelope = http.request(
        LOGIN_ENDPOINT,
        XML,
        data={"CLIkey": api_key, "userId": user_id},
    )

    if envelope.error_messages:
        msg = "Filelocker rejected the login: " + "; ".join(envelope.error_messages)
        raise LoginRejectedError(msg, error_messages=envelope.error_messages)

    if not envelope.info_messages or not envelope.info_messages[0]:
        msg = "Filelocker login returned no request origin"
        raise MissingOriginError(msg)

    origin = envelope.info_messages[0]
    http.set_origin(origin)
    logger.debug("Logged in", user_id=user_id)
    return origin
