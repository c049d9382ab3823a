"""Configuration for the Azure OpenAI image deployment.

Configuration is built with Pydantic Settings from the mapping produced by
:func:`~transmogrifia_images.core.env_file.load_env_file`.  All keys share the
``VITE_AZURE_IMAGE_`` prefix so the same ``.env`` file can be used by the
front-end build.

Configuration Sources
---------------------
Values are resolved in the following priority order:

1. Explicit overrides passed to :meth:`ImageApiConfig.from_env_mapping`
   (e.g. command-line flags)
2. Entries in the ``.env`` file
3. Default values defined in :class:`ImageApiConfig`

The ``.env`` file is the only credential input.  Process environment
variables are never read, and Pydantic's own env and dotenv sources are
disabled; the file is parsed by :mod:`transmogrifia_images.core.env_file`,
whose rules are narrower.

Example .env file::

    VITE_AZURE_IMAGE_ENDPOINT=https://my-resource.openai.azure.com/
    VITE_AZURE_IMAGE_API_KEY=0123456789abcdef
    VITE_AZURE_IMAGE_DEPLOYMENT=gpt-image-1
    VITE_AZURE_IMAGE_API_VERSION=2025-04-01-preview

Usage Example
-------------
::

    from transmogrifia_images.core.config import load_config

    config = load_config(".env")
    print(config.endpoint, config.deployment)

There is no global configuration instance: the loaded config is passed
explicitly to :class:`~transmogrifia_images.core.image_client.ImageClient`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .env_file import DEFAULT_ENV_FILE, load_env_file
from .errors import ConfigError, ConfigIncompleteError

logger = logging.getLogger(__name__)

ENV_PREFIX = "VITE_AZURE_IMAGE_"
DEFAULT_API_VERSION = "2024-10-21"
REQUIRED_FIELDS = ("endpoint", "api_key", "deployment")


class ImageApiConfig(BaseSettings):
    """Connection and pacing settings for the image generation API.

    Attributes
    ----------
    Credentials:
        endpoint : str
            Azure OpenAI resource URL; trailing slashes are stripped
        api_key : str
            Key sent in the ``api-key`` header
        deployment : str
            Name of the provisioned image model deployment
        api_version : str
            ``api-version`` query parameter (empty falls back to the default)

    Pacing:
        request_delay : float
            Seconds to wait between consecutive generation requests
        request_timeout : float | None
            HTTP timeout in seconds; ``None`` leaves the client default

    Console output:
        prompt_preview_chars : int
            Characters of the prompt shown in progress logs
        response_preview_chars : int
            Characters of an unexpected response body shown in error logs

    Notes
    -----
    - Instances are frozen; build a new one to change values
    - Missing required credentials surface as :class:`ConfigIncompleteError`
      when built through :meth:`from_env_mapping` or :func:`load_config`
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=None,
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Credentials
    endpoint: str = Field(
        ...,
        min_length=1,
        description="Azure OpenAI resource URL (trailing slashes stripped)",
    )
    api_key: str = Field(
        ...,
        min_length=1,
        description="API key for the image deployment",
    )
    deployment: str = Field(
        ...,
        min_length=1,
        description="Image model deployment name",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="Azure OpenAI REST API version",
    )

    # Pacing
    request_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Seconds to wait between generation requests (rate-limit heuristic)",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="HTTP timeout in seconds (None uses the client default)",
    )

    # Console output
    prompt_preview_chars: int = Field(default=120, ge=1)
    response_preview_chars: int = Field(default=300, ge=1)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (init_settings,)

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        stripped = value.rstrip("/")
        if not stripped:
            raise ValueError("endpoint must not be empty")
        return stripped

    @field_validator("api_version", mode="before")
    @classmethod
    def _default_api_version(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_API_VERSION
        return value

    @classmethod
    def from_env_mapping(cls, env: Mapping[str, str], **overrides: Any) -> "ImageApiConfig":
        """Build a config from a parsed ``.env`` mapping.

        Only the exact upper-case ``VITE_AZURE_IMAGE_<FIELD>`` keys with
        non-empty values are used; anything else in the mapping, including
        differently cased spellings, is ignored.

        Args:
            env: Mapping returned by :func:`load_env_file`.
            **overrides: Field values that take precedence over the mapping.
                ``None`` values are ignored.

        Returns:
            Validated configuration.

        Raises:
            ConfigIncompleteError: If endpoint, API key or deployment is missing.
            ConfigError: If any other value fails validation.
        """
        values: dict[str, Any] = {}
        for field_name in cls.model_fields:
            value = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if value:
                values[field_name] = value

        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            missing = []
            problems = []
            for error in e.errors():
                field_name = str(error["loc"][0]) if error["loc"] else ""
                if field_name in REQUIRED_FIELDS:
                    env_name = f"{ENV_PREFIX}{field_name.upper()}"
                    if env_name not in missing:
                        missing.append(env_name)
                else:
                    problems.append(f"{ENV_PREFIX}{field_name.upper()}: {error['msg']}")

            if missing:
                raise ConfigIncompleteError(missing) from e
            raise ConfigError(f"Invalid image API configuration: {'; '.join(problems)}") from e


def load_config(env_path: str | Path = DEFAULT_ENV_FILE, **overrides: Any) -> ImageApiConfig:
    """Load the ``.env`` file and build an :class:`ImageApiConfig` from it.

    Args:
        env_path: Location of the env file.
        **overrides: Passed to :meth:`ImageApiConfig.from_env_mapping`.

    Raises:
        ConfigMissingError: If the env file does not exist.
        ConfigIncompleteError: If a required key is missing.
        ConfigError: If any other value is invalid.
    """
    env = load_env_file(env_path)
    config = ImageApiConfig.from_env_mapping(env, **overrides)
    logger.debug(
        f"Image API config: endpoint={config.endpoint}, deployment={config.deployment}, "
        f"api_version={config.api_version}"
    )
    return config
