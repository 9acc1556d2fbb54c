"""Environment-backed settings for the sysexit command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from sysexit.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults applied by the CLI before command-line flags are considered."""

    log_level: int = logging.INFO
    json_output: bool = False


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read settings from ``SYSEXIT_*`` environment variables.

    Parameters:
        environ (Mapping[str, str] | None): Variables to read. Defaults to ``os.environ``.

    Returns:
        Settings: Parsed settings with defaults for unset variables.

    Raises:
        ConfigurationError: If a variable holds an unsupported value.
    """
    env = os.environ if environ is None else environ

    level_name = env.get("SYSEXIT_LOG_LEVEL", "INFO").strip().upper()
    if level_name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unsupported SYSEXIT_LOG_LEVEL {level_name!r}; "
            f"expected one of {', '.join(LOG_LEVELS)}"
        )

    return Settings(
        log_level=LOG_LEVELS[level_name],
        json_output=_parse_bool("SYSEXIT_JSON", env.get("SYSEXIT_JSON", "")),
    )
