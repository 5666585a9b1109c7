"""Palette assignment — one color per type under a hue/luminosity policy.

Colors come from ``randomcolor``: a hue policy picks the band, luminosity
picks the saturation/brightness bounds within it.
"""

from __future__ import annotations

import colorsys
import logging
import re

import randomcolor

logger = logging.getLogger(__name__)

NAMED_HUES = ("monochrome", "red", "orange", "yellow", "green", "blue", "purple", "pink")
LUMINOSITIES = ("bright", "light", "dark", "random")

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def resolve_hue(hue: str | None) -> str | None:
    """Translate a hue policy into what ``randomcolor`` accepts.

    ``None``/``"random"`` → ``None`` (any hue), named hues pass through, a hex
    color becomes its hue in whole degrees. randomcolor only takes numeric
    hues in 1..359, so a hex hue is clamped into that range.
    """
    if hue is None or hue == "random":
        return None
    if hue in NAMED_HUES:
        return hue
    match = _HEX_RE.match(hue)
    if match:
        r, g, b = (int(match.group(1)[i : i + 2], 16) / 255 for i in (0, 2, 4))
        h, _, _ = colorsys.rgb_to_hsv(r, g, b)
        return str(min(max(round(h * 360), 1), 359))
    raise ValueError(f"Unknown hue: {hue!r}")


def assign_colors(
    count: int,
    hue: str | None = None,
    luminosity: str = "bright",
    seed: int | None = None,
) -> list[str]:
    """Generate exactly ``count`` hex colors. Same seed → same colors."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if luminosity not in LUMINOSITIES:
        raise ValueError(f"Unknown luminosity: {luminosity!r}")
    resolved = resolve_hue(hue)
    if count == 0:
        return []

    colors = randomcolor.RandomColor(seed).generate(
        hue=resolved, luminosity=luminosity, count=count
    )
    logger.debug("Palette: %d colors (hue=%s, luminosity=%s)", count, hue, luminosity)
    return list(colors)
