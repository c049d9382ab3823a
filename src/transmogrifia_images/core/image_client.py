"""HTTP client for the Azure OpenAI image generation endpoint.

This module provides :class:`ImageClient`, which turns a
:class:`~transmogrifia_images.core.models.GenerationRequest` into a PNG file
on disk with exactly one HTTP request.

Key Responsibilities
--------------------
- **Request building**: the URL is
  ``{endpoint}/openai/deployments/{deployment}/images/generations?api-version={version}``
  and the JSON body is ``{"prompt", "n": 1, "size", "output_format": "png"}``.
  The key travels in the ``api-key`` header.
- **Response checking**: a non-2xx status raises :class:`ApiError` with the
  status code and body text; a 2xx body without ``data[0].b64_json`` raises
  :class:`MissingPayloadError`.  Nothing is retried.
- **Writing**: the payload is base64-decoded and written to the request's
  ``output_path``; missing parent directories are created and an existing
  file is overwritten.  No file is written when any step fails.

Usage
-----
::

    from transmogrifia_images.core.config import load_config
    from transmogrifia_images.core.image_client import ImageClient
    from transmogrifia_images.core.prompts import HERO_REQUEST

    with ImageClient(load_config()) as client:
        path = client.generate_and_save(HERO_REQUEST)
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Any

import requests

from .config import ImageApiConfig
from .errors import ApiError, MissingPayloadError
from .models import GenerationRequest

logger = logging.getLogger(__name__)

URL_TEMPLATE = "{endpoint}/openai/deployments/{deployment}/images/generations?api-version={api_version}"


def extract_payload(result: Any) -> str | None:
    """Return ``result["data"][0]["b64_json"]`` or ``None`` if any step is missing."""
    if not isinstance(result, dict):
        return None
    data = result.get("data")
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    payload = first.get("b64_json")
    if not isinstance(payload, str) or not payload:
        return None
    return payload


class ImageClient:
    """Synchronous client for one image model deployment.

    Attributes:
        _config (ImageApiConfig):
            Endpoint, credentials and console preview lengths.
        _session (requests.Session):
            HTTP session used for every request.  Injected sessions are not
            closed by :meth:`close`.
    """

    def __init__(self, config: ImageApiConfig, session: requests.Session | None = None) -> None:
        """Initialise the client.

        Args:
            config: Image API configuration.
            session: Optional HTTP session (tests pass a mock here).  A new
                :class:`requests.Session` is created when omitted.
        """
        self._config = config
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> ImageApiConfig:
        return self._config

    # -- Public interface ---------------------------------------------------

    def build_url(self) -> str:
        """Return the generation URL for the configured deployment."""
        return URL_TEMPLATE.format(
            endpoint=self._config.endpoint,
            deployment=self._config.deployment,
            api_version=self._config.api_version,
        )

    def generate(self, request: GenerationRequest) -> bytes:
        """Request one image and return the decoded PNG bytes.

        Args:
            request: Prompt, size and destination (the destination is only
                used for logging here).

        Returns:
            Raw PNG bytes decoded from the response payload.

        Raises:
            ApiError: If the API returns a non-2xx status or the request
                could not be sent.
            MissingPayloadError: If the response has no decodable
                ``b64_json`` payload.
        """
        preview = request.prompt[: self._config.prompt_preview_chars]
        logger.info("Generating: %s", request.output_path)
        logger.info("    Size: %s", request.size)
        logger.info("    Prompt: %s…", preview)

        url = self.build_url()
        logger.debug("POST %s", url)

        try:
            response = self._session.post(
                url,
                headers={
                    "Content-Type": "application/json",
                    "api-key": self._config.api_key,
                },
                json={
                    "prompt": request.prompt,
                    "n": 1,
                    "size": request.size,
                    "output_format": "png",
                },
                timeout=self._config.request_timeout,
            )
        except requests.RequestException as e:
            raise ApiError(None, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, response.text)

        try:
            result = response.json()
        except ValueError:
            result = None
            raw = response.text
        else:
            raw = json.dumps(result)

        payload = extract_payload(result)
        if payload is None:
            response_preview = raw[: self._config.response_preview_chars]
            logger.error("Unexpected response: %s", response_preview)
            raise MissingPayloadError(response_preview=response_preview)

        # Unpadded payloads are accepted; restore padding to a multiple of 4.
        padded = payload + "=" * (-len(payload) % 4)
        try:
            return base64.b64decode(padded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MissingPayloadError(
                f"b64_json payload is not valid base64: {e}",
                response_preview=payload[: self._config.response_preview_chars],
            ) from e

    def save(self, image_bytes: bytes, output_path: str | Path) -> Path:
        """Write image bytes to ``output_path``, creating parent directories.

        Args:
            image_bytes: Decoded PNG data.
            output_path: Destination; relative paths resolve against the
                current working directory.

        Returns:
            The absolute path written.
        """
        path = Path(output_path).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(image_bytes)
        logger.info("Saved %s (%d bytes)", output_path, len(image_bytes))
        return path

    def generate_and_save(self, request: GenerationRequest) -> Path:
        """Generate an image and write it to ``request.output_path``.

        Returns:
            The absolute path written.
        """
        image_bytes = self.generate(request)
        return self.save(image_bytes, request.output_path)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "ImageClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
