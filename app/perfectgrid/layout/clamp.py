"""Height bounds and the per-item width check."""

from __future__ import annotations


def clamp_height(height: float, *, min_height: float, max_height: float) -> float:
    return max(min_height, min(max_height, height))


def fits_min_item_width(height: float, ratio: float, *, min_item_width: float) -> bool:
    """True when an item of ``ratio`` rendered at ``height`` is wide enough."""

    return ratio * height >= min_item_width
