# planline/density.py
from __future__ import annotations

# Width thresholds in percent of the window width. Ordered; first match wins.
TINY_LABEL_THRESHOLD_PCT = 3.0
NANO_THRESHOLD_PCT = 6.0
MICRO_THRESHOLD_PCT = 10.0
SMALL_THRESHOLD_PCT = 14.0

VARIANT_TINY_LABEL = "tinyLabel"  # external floating label only
VARIANT_NANO = "nano"             # icon/dot marker only
VARIANT_MICRO = "micro"           # title only
VARIANT_SMALL = "small"           # title + compact date
VARIANT_NORMAL = "normal"         # title + subtitle + date

VARIANTS = (VARIANT_TINY_LABEL, VARIANT_NANO, VARIANT_MICRO, VARIANT_SMALL, VARIANT_NORMAL)

_THRESHOLDS = (
    (TINY_LABEL_THRESHOLD_PCT, VARIANT_TINY_LABEL),
    (NANO_THRESHOLD_PCT, VARIANT_NANO),
    (MICRO_THRESHOLD_PCT, VARIANT_MICRO),
    (SMALL_THRESHOLD_PCT, VARIANT_SMALL),
)


def classify_density(width_pct: float) -> str:
    """Map a bar width (percent of window) to its label-density variant."""
    for limit, variant in _THRESHOLDS:
        if width_pct < limit:
            return variant
    return VARIANT_NORMAL
