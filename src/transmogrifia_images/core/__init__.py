"""Core functionality for raw image generation.

Architecture Overview
---------------------
1. **Configuration Layer** (env_file.py, config.py):
   - ``.env`` parsing with narrow, predictable rules
   - Pydantic Settings model for the ``VITE_AZURE_IMAGE_*`` keys

2. **Request Layer** (models.py, prompts.py):
   - Immutable generation requests and the two default jobs

3. **Client Layer** (image_client.py):
   - One HTTP POST per image, base64 decoding, file writing

4. **Errors** (errors.py):
   - Fatal error hierarchy shared by every layer

See Also
--------
- transmogrifia_images.workflows.batch: sequential orchestration
- transmogrifia_images.cli.main: command-line entry point
"""

from transmogrifia_images.core.config import ImageApiConfig, load_config
from transmogrifia_images.core.env_file import load_env_file, parse_env_text
from transmogrifia_images.core.errors import (
    ApiError,
    ConfigError,
    ConfigIncompleteError,
    ConfigMissingError,
    MissingPayloadError,
    TransmogrifiaError,
)
from transmogrifia_images.core.image_client import ImageClient
from transmogrifia_images.core.models import BatchResult, GenerationRequest

__all__ = [
    "ApiError",
    "BatchResult",
    "ConfigError",
    "ConfigIncompleteError",
    "ConfigMissingError",
    "GenerationRequest",
    "ImageApiConfig",
    "ImageClient",
    "MissingPayloadError",
    "TransmogrifiaError",
    "load_config",
    "load_env_file",
    "parse_env_text",
]
