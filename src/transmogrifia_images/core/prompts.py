"""Prompts and destinations for the Library of Transmogrifia artwork.

The hero image is the wide sign-in background; the icon is the square
source for the app icon and favicon.  Both are written as "raw" PNGs that a
separate optimisation step resizes and compresses.
"""

from pathlib import Path

from .models import GenerationRequest

OUTPUT_DIR = Path("public/images")

HERO_PROMPT = (
    "A watercolor illustration of a grand classical library inspired by the ancient "
    "Library of Alexandria. The scene shows tall stone columns, arched ceilings, and "
    "shelves overflowing with scrolls and books, with warm light streaming through high "
    "windows. Scholars read at long wooden tables. The watercolor effect should be "
    "pronounced with paint bleeding, color blending, and brushstroke textures. Use "
    "predominantly green and blue hues, a bit muted, with warm golden accents from the "
    "window light. No text or labels."
)

ICON_PROMPT = (
    "A watercolor illustration of a single classical scroll or book on a stone pedestal, "
    "viewed straight-on as an app icon. Simple, iconic composition centered in the frame "
    "with generous padding. The watercolor effect should be pronounced with paint "
    "bleeding, color blending, and brushstroke textures. Use predominantly green and blue "
    "hues, a bit muted. Minimal detail, bold shapes suitable for a small icon. No text, "
    "no background clutter."
)

HERO_REQUEST = GenerationRequest(
    name="hero",
    prompt=HERO_PROMPT,
    size="1536x1024",
    output_path=OUTPUT_DIR / "hero-raw.png",
)

ICON_REQUEST = GenerationRequest(
    name="icon",
    prompt=ICON_PROMPT,
    size="1024x1024",
    output_path=OUTPUT_DIR / "icon-raw.png",
)

# Order matters: hero first, then icon.
DEFAULT_REQUESTS: tuple[GenerationRequest, ...] = (HERO_REQUEST, ICON_REQUEST)
