"""Minimal ``.env`` reader for the image API credentials.

The format is deliberately narrower than what ``python-dotenv`` accepts:

- each line is trimmed; blank lines and lines starting with ``#`` are ignored
- a line is split at its *first* ``=``; both sides are trimmed
- values are taken verbatim (no unquoting, no escape processing, no
  variable expansion)
- lines without ``=`` or with an empty key are skipped silently
- a repeated key overwrites the earlier value

Example::

    # Azure OpenAI image deployment
    VITE_AZURE_IMAGE_ENDPOINT=https://example.openai.azure.com/
    VITE_AZURE_IMAGE_API_KEY = abc123
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ConfigMissingError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def parse_env_text(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines into a mapping.

    Args:
        text: Contents of an env file.

    Returns:
        Mapping of trimmed keys to trimmed values.
    """
    env: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        env[key] = value.strip()
    return env


def load_env_file(path: str | Path = DEFAULT_ENV_FILE) -> dict[str, str]:
    """Read and parse an env file.

    Relative paths are resolved against the current working directory.

    Args:
        path: Location of the env file (default ``.env``).

    Returns:
        Parsed mapping, see :func:`parse_env_text`.

    Raises:
        ConfigMissingError: If the file does not exist.
    """
    env_path = Path(path).resolve()
    if not env_path.is_file():
        raise ConfigMissingError(env_path)

    env = parse_env_text(env_path.read_text(encoding="utf-8"))
    logger.debug(f"Loaded {len(env)} entries from {env_path}")
    return env
