"""Turn finished rows back into one height per input item."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from app.perfectgrid.layout.rows import Row


def expand_rows(rows: Iterable[Row], count: int) -> List[float]:
    """Write each row's height into every slot it covers.

    ``rows`` must partition ``range(count)`` in order.
    """

    heights: List[float] = []
    for row in rows:
        if row.start != len(heights):
            raise ValueError(f"row starts at {row.start}, expected {len(heights)}")
        heights.extend([row.height] * row.count)

    if len(heights) != count:
        raise ValueError(f"rows cover {len(heights)} items, expected {count}")
    return heights


def round_half_away(value: float) -> int:
    """Nearest integer, halves rounded away from zero (2.5 -> 3, -2.5 -> -3)."""

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_heights(heights: Sequence[float]) -> List[int]:
    return [round_half_away(h) for h in heights]
