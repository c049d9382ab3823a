"""Shared pytest fixtures for Transmogrifia image tests."""

import base64
import json
import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest

from transmogrifia_images.core.config import ImageApiConfig
from transmogrifia_images.core.models import GenerationRequest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00fake-image-data\xff" * 4

ENV_KEYS = (
    "VITE_AZURE_IMAGE_ENDPOINT",
    "VITE_AZURE_IMAGE_API_KEY",
    "VITE_AZURE_IMAGE_DEPLOYMENT",
    "VITE_AZURE_IMAGE_API_VERSION",
    "VITE_AZURE_IMAGE_REQUEST_DELAY",
    "VITE_AZURE_IMAGE_REQUEST_TIMEOUT",
    "VITE_AZURE_IMAGE_PROMPT_PREVIEW_CHARS",
    "VITE_AZURE_IMAGE_RESPONSE_PREVIEW_CHARS",
)

VALID_ENV_TEXT = (
    "# Azure OpenAI image deployment\n"
    "VITE_AZURE_IMAGE_ENDPOINT=https://example.openai.azure.com/\n"
    "VITE_AZURE_IMAGE_API_KEY=test-key\n"
    "VITE_AZURE_IMAGE_DEPLOYMENT=gpt-image-1\n"
)


@pytest.fixture(autouse=True)
def clean_image_env(monkeypatch):
    """Keep real VITE_AZURE_IMAGE_* variables from leaking into tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def workdir(temp_dir: Path, monkeypatch) -> Path:
    """Run the test with ``temp_dir`` as the current working directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def env_file(workdir: Path) -> Path:
    """Write a complete ``.env`` into the working directory."""
    path = workdir / ".env"
    path.write_text(VALID_ENV_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def test_config() -> ImageApiConfig:
    """Create a test configuration with no delay between requests."""
    return ImageApiConfig(
        endpoint="https://example.openai.azure.com",
        api_key="test-key",
        deployment="gpt-image-1",
        request_delay=0.0,
    )


@pytest.fixture
def png_b64() -> str:
    """Base64 encoding of :data:`PNG_BYTES`."""
    return base64.b64encode(PNG_BYTES).decode("ascii")


def make_response(status_code: int = 200, payload=None, text: str | None = None) -> MagicMock:
    """Build a mock ``requests.Response``.

    Args:
        status_code: HTTP status.
        payload: Object returned by ``.json()``; when ``None`` and ``text`` is
            given, ``.json()`` raises ``ValueError``.
        text: Body text; defaults to the JSON dump of ``payload``.
    """
    response = MagicMock()
    response.status_code = status_code
    if payload is not None:
        response.json.return_value = payload
        response.text = text if text is not None else json.dumps(payload)
    else:
        response.json.side_effect = ValueError("not JSON")
        response.text = text or ""
    return response


@pytest.fixture
def mock_session(png_b64: str) -> MagicMock:
    """HTTP session whose ``post`` returns a successful image response."""
    session = MagicMock()
    session.post.return_value = make_response(200, {"data": [{"b64_json": png_b64}]})
    return session


@pytest.fixture
def sample_request(temp_dir: Path) -> GenerationRequest:
    """A small request writing into a not-yet-existing nested directory."""
    return GenerationRequest(
        name="sample",
        prompt="A watercolor scroll on a stone pedestal",
        size="1024x1024",
        output_path=temp_dir / "public" / "images" / "sample-raw.png",
    )


@pytest.fixture
def response_factory():
    """Expose :func:`make_response` to tests."""
    return make_response


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes the mocked API returns."""
    return PNG_BYTES
