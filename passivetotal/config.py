"""Client configuration using pydantic-settings.

Environment variables are prefixed with PASSIVETOTAL_ (e.g.
PASSIVETOTAL_USERNAME, PASSIVETOTAL_APIKEY). A TOML config file with a
``[passivetotal]`` table can be layered on top:

    [passivetotal]
    username = "USERNAME"
    apikey = "SECRET_API_KEY"
    timeout = 60
"""

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from passivetotal.errors import ConfigError

BASE_URL = "https://api.passivetotal.org/v2"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_CONFIG_FILE = ".passivetotal.toml"


class Settings(BaseSettings):
    """PassiveTotal client settings loaded from environment variables."""

    # Credentials
    username: str = ""
    apikey: str = ""

    # Transport
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Logging (CLI only; the library never configures loguru itself)
    debug: bool = False
    log_level: str = "WARNING"

    model_config = {"env_prefix": "PASSIVETOTAL_"}

    def require_credentials(self) -> "Settings":
        """Return self, or raise ConfigError if username or apikey is missing."""
        if not self.username or not self.apikey:
            raise ConfigError(
                "PassiveTotal username and apikey are required. Set them in the "
                "config file or via PASSIVETOTAL_USERNAME / PASSIVETOTAL_APIKEY."
            )
        return self


def default_config_path() -> Path:
    """Location of the per-user config file ($HOME/.passivetotal.toml)."""
    return Path.home() / DEFAULT_CONFIG_FILE


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the ``[passivetotal]`` table from a TOML config file.

    Args:
        path: Path to the TOML file.

    Returns:
        The table contents as a dict.

    Raises:
        ConfigError: If the file cannot be read or parsed, or has no
            ``[passivetotal]`` table.
    """
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as e:
        raise ConfigError(f"Failed to open config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Unable to parse configuration file {path}: {e}") from e

    section = data.get("passivetotal")
    if not isinstance(section, dict):
        raise ConfigError(f"Config file {path} has no [passivetotal] table")
    return section


def load_settings(path: Path | None = None, **overrides: Any) -> Settings:
    """Build Settings from the environment, a config file and explicit overrides.

    Precedence, highest first: ``overrides`` (values that are not None), the
    config file, PASSIVETOTAL_* environment variables, defaults.

    An explicit ``path`` must exist. Without one, the default per-user file is
    used when present and silently skipped otherwise.

    Args:
        path: Optional config file path.
        **overrides: Individual settings to force (e.g. timeout from the CLI).

    Returns:
        The merged Settings.

    Raises:
        ConfigError: If the config file is unreadable or a value is invalid.
    """
    values: dict[str, Any] = {}

    if path is not None:
        values.update(read_config_file(path))
        logger.debug("Loaded config file {}", path)
    else:
        default = default_config_path()
        if default.is_file():
            values.update(read_config_file(default))
            logger.debug("Loaded config file {}", default)

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
