"""Value types passed between the client, the batch workflow and the CLI.

Models
------
GenerationRequest
    One image to generate: prompt, pixel size and destination file.
BatchResult
    Outcome of a batch run: the files written so far and the error that
    stopped the run, if any.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import TransmogrifiaError

SIZE_PATTERN = r"^\d+x\d+$"


class GenerationRequest(BaseModel):
    """A single image generation job.

    Attributes:
        name: Short label used in logs and by ``--only`` (e.g. ``"hero"``).
        prompt: Text description sent to the model.
        size: ``<width>x<height>`` in pixels, as accepted by the API
            (e.g. ``"1536x1024"``).
        output_path: Where the decoded PNG is written.  Relative paths are
            resolved against the current working directory at write time.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="image", min_length=1)
    prompt: str = Field(..., min_length=1, description="Text prompt for the image model.")
    size: str = Field(..., pattern=SIZE_PATTERN, description="Pixel size, e.g. '1024x1024'.")
    output_path: Path = Field(..., description="Destination PNG path.")

    @property
    def width(self) -> int:
        return int(self.size.split("x")[0])

    @property
    def height(self) -> int:
        return int(self.size.split("x")[1])


@dataclass
class BatchResult:
    """Result of :func:`~transmogrifia_images.workflows.batch.run_batch`.

    A failed run keeps the paths that were written before the failure, but
    no distinction is made between partial and total failure: ``ok`` is
    simply ``False`` whenever ``error`` is set.
    """

    saved_paths: list[Path] = field(default_factory=list)
    error: TransmogrifiaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
