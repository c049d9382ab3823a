"""Allow ``python -m transmogrifia_images``."""

from transmogrifia_images.cli.main import run

run()
