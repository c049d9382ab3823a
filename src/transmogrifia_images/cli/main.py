"""Command-line entry point for the raw image generator.

Usage
-----
Installed entry point::

    transmogrifia-images [--env-file PATH] [--delay SECONDS] [--only {hero,icon}] [-v]

Direct invocation::

    python -m transmogrifia_images

Exit status is ``0`` when every image was written and ``1`` on a missing or
incomplete ``.env`` file, an API error, a missing payload, or any unexpected
failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from transmogrifia_images import __version__
from transmogrifia_images.core.config import load_config
from transmogrifia_images.core.env_file import DEFAULT_ENV_FILE
from transmogrifia_images.core.errors import ConfigError
from transmogrifia_images.core.image_client import ImageClient
from transmogrifia_images.core.prompts import DEFAULT_REQUESTS
from transmogrifia_images.workflows.batch import run_batch

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stdout using the project log format."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transmogrifia-images",
        description="Generate the raw hero image and app icon with Azure OpenAI.",
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help="Path to the env file with VITE_AZURE_IMAGE_* credentials (default: .env)",
    )
    parser.add_argument(
        "--delay",
        type=_non_negative_float,
        default=None,
        help="Seconds to wait between requests (default: VITE_AZURE_IMAGE_REQUEST_DELAY or 1)",
    )
    parser.add_argument(
        "--only",
        choices=[request.name for request in DEFAULT_REQUESTS],
        help="Generate a single image instead of both",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.env_file, request_delay=args.delay)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    requests_to_run = DEFAULT_REQUESTS
    if args.only:
        requests_to_run = tuple(r for r in DEFAULT_REQUESTS if r.name == args.only)

    try:
        with ImageClient(config) as client:
            result = run_batch(client, requests_to_run, delay=config.request_delay)
    except Exception as e:
        logger.exception(f"Fatal: {e}")
        return 1

    if not result.ok:
        logger.error(f"Fatal: {result.error}")
        return 1

    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
