# planline/palette.py
from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Bars brighter than this get dark label text.
LIGHT_LUMINANCE = 0.55


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    m = _HEX_RE.match((color or "").strip())
    if not m:
        raise ValueError(f"Invalid hex color: {color!r}")
    h = m.group(1)
    if len(h) == 3:
        h = "".join(c + c for c in h)
    num = int(h, 16)
    return (num >> 16) & 255, (num >> 8) & 255, num & 255


def relative_luminance(rgb: tuple[int, int, int]) -> float:
    """sRGB relative luminance in [0, 1]."""
    chans = []
    for v in rgb:
        x = v / 255
        chans.append(x / 12.92 if x <= 0.03928 else ((x + 0.055) / 1.055) ** 2.4)
    r, g, b = chans
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def is_light(color: str) -> bool:
    """True when `color` is light enough to need dark text. Invalid colors are dark."""
    try:
        return relative_luminance(hex_to_rgb(color)) > LIGHT_LUMINANCE
    except ValueError:
        return False
