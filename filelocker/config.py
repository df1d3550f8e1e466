"""
Filelocker client configuration.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from filelocker.exceptions import ConfigurationError
from filelocker.version import __version__

_HOST_CHARS = re.compile(r"[\w.\-:%]+")


@dataclass(frozen=True, kw_only=True)
class FilelockerConfig:
    """
    Attributes:
        base_url: Base URL of the Filelocker installation (e.g. https://files.yale.edu).
        timeout: Overall request timeout in seconds.
        user_agent: User-Agent header value.
        default_upload_notes: Notes sent with an upload when none are given.
    """

    base_url: str
    timeout: float = 30.0
    user_agent: str = f"filelocker-python/{__version__}"
    default_upload_notes: str = "Uploaded by filelocker-python"

    def __post_init__(self) -> None:
        try:
            parts = urlsplit(self.base_url)
            host = parts.hostname
            httpx.URL(self.base_url)
        except (ValueError, httpx.InvalidURL) as e:
            msg = "base_url is not a valid URL"
            raise ConfigurationError(msg, base_url=self.base_url) from e
        if parts.scheme not in ("http", "https") or not host:
            msg = "base_url must be an absolute http(s) URL"
            raise ConfigurationError(msg, base_url=self.base_url)
        if not _HOST_CHARS.fullmatch(host):
            msg = "base_url has an invalid host"
            raise ConfigurationError(msg, base_url=self.base_url)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ConfigurationError(msg, timeout=self.timeout)
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
