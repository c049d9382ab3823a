"""Transmogrifia Images - raw artwork generation via Azure OpenAI."""

__version__ = "0.1.0"

from transmogrifia_images.core.config import ImageApiConfig, load_config
from transmogrifia_images.core.image_client import ImageClient
from transmogrifia_images.core.models import BatchResult, GenerationRequest
from transmogrifia_images.workflows.batch import run_batch

__all__ = [
    "BatchResult",
    "GenerationRequest",
    "ImageApiConfig",
    "ImageClient",
    "load_config",
    "run_batch",
]
