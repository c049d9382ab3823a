"""Sequential batch generation of the raw artwork.

:func:`run_batch` drives an image client through a list of
:class:`~transmogrifia_images.core.models.GenerationRequest` objects, one at
a time, pausing between requests.  The pause is a fixed rate-limit heuristic,
not an adaptive back-off.

The first failure stops the run: remaining requests are not attempted and the
error is returned on the :class:`BatchResult` rather than raised, leaving the
caller to decide what a failure means (the CLI maps it to exit status 1).

Example::

    >>> from transmogrifia_images.workflows.batch import run_batch
    >>> result = run_batch(client, delay=0)
    >>> result.ok
    True
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from transmogrifia_images.core.errors import TransmogrifiaError
from transmogrifia_images.core.models import BatchResult, GenerationRequest
from transmogrifia_images.core.prompts import DEFAULT_REQUESTS

logger = logging.getLogger(__name__)

BANNER = "Library of Transmogrifia — Image Generation"
FOLLOW_UP_HINT = "Raw images generated. Run `npx tsx scripts/process-images.ts` to optimize."
DEFAULT_DELAY = 1.0


class ImageGenerator(Protocol):
    def generate_and_save(self, request: GenerationRequest) -> Path: ...


def run_batch(
    client: ImageGenerator,
    requests: Sequence[GenerationRequest] = DEFAULT_REQUESTS,
    delay: float = DEFAULT_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> BatchResult:
    """Generate each request in order, pausing ``delay`` seconds between them.

    Args:
        client: Anything with a ``generate_and_save(request) -> Path`` method,
            normally an :class:`~transmogrifia_images.core.image_client.ImageClient`.
        requests: Jobs to run, in order.  Defaults to hero then icon.
        delay: Seconds to wait before every request except the first.  Callers
            holding an :class:`ImageApiConfig` pass its ``request_delay``.
        sleep: Blocking wait function (injectable for tests).

    Returns:
        BatchResult with the saved paths and, on failure, the error that
        stopped the run.
    """
    logger.info(BANNER)
    result = BatchResult()

    for index, request in enumerate(requests):
        if index > 0 and delay > 0:
            logger.debug("Waiting %.2fs before next request", delay)
            sleep(delay)

        try:
            path = client.generate_and_save(request)
        except TransmogrifiaError as e:
            logger.debug("Request '%s' failed, stopping batch", request.name)
            result.error = e
            return result

        result.saved_paths.append(path)

    logger.info(FOLLOW_UP_HINT)
    return result
