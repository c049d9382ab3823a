"""Error types raised while generating the raw images.

Every failure in a run is fatal: nothing is retried and nothing is resumed.
Errors raised deep inside :class:`~transmogrifia_images.core.image_client.ImageClient`
travel unchanged up to :func:`~transmogrifia_images.workflows.batch.run_batch`,
which records them on the returned :class:`BatchResult`.  The command-line
entry point is the only place that turns them into an exit code.

Hierarchy
---------
::

    TransmogrifiaError
    ├── ConfigError
    │   ├── ConfigMissingError      no .env file
    │   └── ConfigIncompleteError   required key absent
    ├── ApiError                    non-2xx response or transport failure
    └── MissingPayloadError         2xx response without a decodable image
"""

from __future__ import annotations


class TransmogrifiaError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigError(TransmogrifiaError):
    """The image API credentials could not be loaded."""


class ConfigMissingError(ConfigError):
    """The ``.env`` file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"No .env file found at {path}. "
            "Copy .env.example to .env and fill in credentials."
        )


class ConfigIncompleteError(ConfigError):
    """One or more required ``VITE_AZURE_IMAGE_*`` keys are absent or empty."""

    def __init__(self, missing_keys: list[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            f"Missing VITE_AZURE_IMAGE_* env vars: {', '.join(self.missing_keys)}. Check .env."
        )


class ApiError(TransmogrifiaError):
    """The image API answered with a non-success status.

    ``status_code`` is ``None`` when no response was received at all
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, status_code: int | None, body: str):
        self.status_code = status_code
        self.body = body
        label = status_code if status_code is not None else "request failed"
        super().__init__(f"Image API {label}: {body}")


class MissingPayloadError(TransmogrifiaError):
    """A success response carried no decodable ``b64_json`` payload."""

    def __init__(self, message: str = "No b64_json in response", response_preview: str = ""):
        self.response_preview = response_preview
        super().__init__(message)
