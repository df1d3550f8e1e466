"""
CLI settings.

Values come from command-line flags, ``FILELOCKER_*`` environment variables
(resolved by typer) and an optional YAML config file, in that order of
precedence.
"""

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

import structlog
import yaml

from filelocker.cli.durations import parse_duration
from filelocker.config import FilelockerConfig
from filelocker.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

ENV_PREFIX = "FILELOCKER_"
DEFAULT_CONFIG_PATH = Path.home() / ".filelocker.yaml"
DEFAULT_TIMEOUT = "30s"

CONFIG_KEYS = frozenset({"login", "key", "url", "timeout", "json"})


@dataclass(frozen=True, kw_only=True)
class CliSettings:
    """
    Resolved settings handed to every command.

    Attributes:
        login: Filelocker user id.
        api_key: CLI API key.
        url: Filelocker base URL.
        timeout: HTTP client timeout.
        as_json: Print JSON instead of human-readable output.
        config_file: Config file that was read, if any.
    """

    login: str = ""
    api_key: str = ""
    url: str = ""
    timeout: timedelta = timedelta(seconds=30)
    as_json: bool = False
    config_file: Path | None = None

    def client_config(self) -> FilelockerConfig:
        """
        Build the library configuration.

        Raises:
            ConfigurationError: If the URL is missing or invalid.
        """
        if not self.url:
            msg = "filelocker URL is required (--url, FILELOCKER_URL or config file)"
            raise ConfigurationError(msg)
        return FilelockerConfig(base_url=self.url, timeout=self.timeout.total_seconds())


def env_var(name: str) -> str:
    """Environment variable name for a setting."""
    return f"{ENV_PREFIX}{name.upper()}"


def load_config_file(path: Path | None) -> tuple[dict[str, Any], Path | None]:
    """
    Read the YAML config file.

    Args:
        path: Explicit file; when None, ``~/.filelocker.yaml`` is used if it exists.

    Returns:
        The mapping of known keys and the path that was read (None if no file).

    Raises:
        ConfigurationError: If an explicit file is missing or any file is invalid.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return {}, None
        path = DEFAULT_CONFIG_PATH

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f"Cannot read config file: {e.strerror}"
        raise ConfigurationError(msg, path=str(path)) from e
    except yaml.YAMLError as e:
        msg = "Config file is not valid YAML"
        raise ConfigurationError(msg, path=str(path)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Config file must contain a mapping"
        raise ConfigurationError(msg, path=str(path))

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        logger.warning("Ignoring unknown config keys", keys=sorted(unknown), path=str(path))

    logger.info("Using config file", path=str(path))
    return {k: v for k, v in data.items() if k in CONFIG_KEYS}, path


def parse_flag(value: Any, key: str) -> bool:
    """Read a boolean config value; quoted YAML strings such as "false" are honoured."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off", ""):
        return False
    msg = "Config value must be a boolean"
    raise ConfigurationError(msg, key=key, value=value)


def resolve_settings(
    *,
    login: str | None,
    api_key: str | None,
    url: str | None,
    timeout: str | None,
    as_json: bool,
    config_path: Path | None,
) -> CliSettings:
    """
    Merge flag/environment values over config file values.

    Arguments left as None (or False for ``as_json``) fall back to the config
    file, then to defaults.

    Raises:
        ConfigurationError: If the config file or timeout is invalid.
    """
    file_values, used_path = load_config_file(config_path)

    def pick(value: str | None, key: str, default: str = "") -> str:
        if value is not None:
            return value
        file_value = file_values.get(key)
        return default if file_value is None else str(file_value)

    duration = parse_duration(pick(timeout, "timeout", DEFAULT_TIMEOUT))
    if duration <= timedelta():
        msg = "Timeout must be positive"
        raise ConfigurationError(msg, timeout=str(duration))

    return CliSettings(
        login=pick(login, "login"),
        api_key=pick(api_key, "key"),
        url=pick(url, "url"),
        timeout=duration,
        as_json=as_json or parse_flag(file_values.get("json"), "json"),
        config_file=used_path,
    )
