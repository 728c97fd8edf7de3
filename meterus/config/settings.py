"""
Configuration loading for the Meterus SDK.

Settings come from an optional YAML file, then environment variables
override individual values:

    METERUS_ADDR            target address (host:port)
    METERUS_API_KEY         API key injected into calls
    METERUS_SECURE          "true" to use TLS
    METERUS_AUTH_MODE       "explicit" or "interceptor"
    METERUS_CONNECT_TIMEOUT seconds to wait for the channel to be ready

Example ``meterus.yaml``::

    address: meterus.internal:8000
    api_key: sk_live_123
    secure: true
    logging:
      level: INFO
      json_format: true
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from meterus.exceptions import SDKConfigurationError
from meterus.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ADDRESS = "localhost:8000"
AUTH_MODES = ("explicit", "interceptor")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class LoggingConfig:
    """
    Logging settings applied by ``setup_logging``.

    Attributes:
        level: Log level name
        file: Optional log file path
        json_format: JSON output when True, console output otherwise
    """
    level: str = "INFO"
    file: Optional[str] = None
    json_format: bool = True


@dataclass
class MeterusConfig:
    """
    Settings used to construct a ``MeterusClient``.

    Attributes:
        address: Service address (host:port)
        api_key: API key injected into authenticated calls
        secure: Use a TLS channel instead of plaintext
        auth_mode: "explicit" (per-call header) or "interceptor" (channel hook)
        connect_timeout: Seconds to wait for the channel to become ready
        logging: Logging settings
    """
    address: str = DEFAULT_ADDRESS
    api_key: Optional[str] = None
    secure: bool = False
    auth_mode: str = "explicit"
    connect_timeout: Optional[float] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        if self.auth_mode not in AUTH_MODES:
            raise SDKConfigurationError(
                f"auth_mode must be one of {', '.join(AUTH_MODES)}, got {self.auth_mode!r}"
            )


def _parse_bool(name: str, value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise SDKConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_timeout(name: str, value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise SDKConfigurationError(f"{name} must be a number, got {value!r}") from e


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise SDKConfigurationError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SDKConfigurationError(f"invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SDKConfigurationError(f"config file {path} must contain a mapping")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MeterusConfig:
    """
    Load SDK configuration.

    Args:
        config_path: Optional YAML file. Missing values fall back to defaults.
        environ: Environment mapping, ``os.environ`` by default.

    Returns:
        The resolved configuration.

    Raises:
        SDKConfigurationError: If the file cannot be read or a value is invalid.
    """
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    if config_path is not None:
        data = _read_yaml(Path(config_path))
        logger.debug("config_file_loaded", path=str(config_path))

    logging_data = data.get("logging") or {}
    if not isinstance(logging_data, dict):
        raise SDKConfigurationError("logging section must be a mapping")

    address = env.get("METERUS_ADDR") or data.get("address") or DEFAULT_ADDRESS
    api_key = env.get("METERUS_API_KEY") or data.get("api_key")
    secure = _parse_bool("secure", env.get("METERUS_SECURE", data.get("secure", False)))
    auth_mode = env.get("METERUS_AUTH_MODE") or data.get("auth_mode") or "explicit"
    connect_timeout = _parse_timeout(
        "connect_timeout", env.get("METERUS_CONNECT_TIMEOUT", data.get("connect_timeout"))
    )

    return MeterusConfig(
        address=address,
        api_key=api_key,
        secure=secure,
        auth_mode=auth_mode,
        connect_timeout=connect_timeout,
        logging=LoggingConfig(
            level=logging_data.get("level", "INFO"),
            file=logging_data.get("file"),
            json_format=_parse_bool("logging.json_format", logging_data.get("json_format", True)),
        ),
    )
