"""Configuration and credential resolution for howto."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from howto.errors import ConfigError, CredentialsError

log = logging.getLogger(__name__)

MODEL = "openai/gpt-4o-2024-08-06"
TEMPERATURE = 0.0
MAX_TOKENS = 1024

API_KEY_ENV_VAR = "HOWTO_CLI_OPENAI_API_KEY"
DATA_DIR_ENV_VAR = "HOWTO_CLI_DATA_DIR"
DEBUG_ENV_VAR = "HOWTO_CLI_DEBUG"
DEFAULT_DATA_DIR_NAME = ".howto-cli"
CREDENTIALS_FILE = "credentials"


def read_env_var(name: str) -> str | None:
    """Return the value of an environment variable, or None when unset.

    Bytes that do not decode as UTF-8 reach ``os.environ`` as lone
    surrogates, so a value that cannot be re-encoded is rejected.
    """
    value = os.environ.get(name)
    if value is None:
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ConfigError(
            f"The value of the {name} environment variable is not valid Unicode."
        ) from None
    return value


def debug_enabled() -> bool:
    """Return whether debug logging was requested through the environment."""
    value = os.environ.get(DEBUG_ENV_VAR, "")
    return value not in ("", "0")


def get_data_dir() -> Path:
    """Return the directory holding the credentials file."""
    override = read_env_var(DATA_DIR_ENV_VAR)
    if override is not None:
        return Path(override)
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError(
            "Unable to determine home directory. "
            f"Set the {DATA_DIR_ENV_VAR} environment variable to override."
        ) from e
    return home / DEFAULT_DATA_DIR_NAME


def _api_key_from_env() -> str | None:
    api_key = read_env_var(API_KEY_ENV_VAR)
    if api_key is not None:
        log.debug("using API key from %s", API_KEY_ENV_VAR)
    return api_key


def _api_key_from_file() -> str:
    path = get_data_dir() / CREDENTIALS_FILE
    log.debug("reading API key from %s", path)
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsError(f"Unable to read OpenAI API key from file: {e}") from e
    return contents.strip()


# Tried in order; the first non-None result wins and the last one always
# returns or raises.
API_KEY_STRATEGIES: tuple[Callable[[], str | None], ...] = (
    _api_key_from_env,
    _api_key_from_file,
)


def get_api_key() -> str:
    """Resolve the OpenAI API key from the environment or the credentials file."""
    for strategy in API_KEY_STRATEGIES:
        api_key = strategy()
        if api_key is not None:
            return api_key
    raise CredentialsError("No OpenAI API key could be found.")
