"""Greedy row packing for justified grids.

One left-to-right pass: a row keeps taking items while its solved height
stays at or above ``min_height``. The first item that would push the height
below the minimum ends the row, either before or after that item, whichever
height lands closer to the middle of the allowed range (ties take the item).
The last row simply ends with the input.

A row also ends before the first item that would leave its narrowest
member rendered below ``min_item_width``; a single item is always
accepted.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from app.perfectgrid.layout.clamp import clamp_height, fits_min_item_width
from app.perfectgrid.layout.params import GridParams, validate_ratios
from app.perfectgrid.layout.solver import solve_row_height

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """Items ``[start, end)`` rendered at one shared height.

    solved_height is the height that fills the container exactly; height is
    that value clamped into the allowed range.
    """

    start: int
    end: int
    aspect_sum: float
    solved_height: float
    height: float

    @property
    def count(self) -> int:
        return self.end - self.start

    def as_pair(self) -> Tuple[int, float]:
        return self.count, self.height


def _row_boundary(ratios: Sequence[float], start: int, params: GridParams) -> int:
    """Return the exclusive end index of the row beginning at ``start``.

    Growing a row never raises its clamped height or its narrowest ratio,
    so the first item that breaks ``min_item_width`` bounds the row: it and
    everything after it go to the next row.
    """

    aspect_sum = 0.0
    narrowest = math.inf
    last_end = None
    last_height = 0.0
    mid = params.mid_height

    for index in range(start, len(ratios)):
        aspect_sum += ratios[index]
        narrowest = min(narrowest, ratios[index])
        height = solve_row_height(
            aspect_sum=aspect_sum,
            count=index - start + 1,
            full_width=params.full_width,
            gap=params.gap,
        )

        clamped = clamp_height(height, min_height=params.min_height, max_height=params.max_height)
        if index > start and not fits_min_item_width(
            clamped, narrowest, min_item_width=params.min_item_width
        ):
            logger.debug("row %d: item too narrow at %.2f, closing before item %d", start, clamped, index)
            return index

        if height >= params.min_height:
            last_end, last_height = index + 1, height
            continue

        if last_end is None:
            # Even a lone item is too wide for the minimum height.
            return index + 1

        if abs(height - mid) <= abs(last_height - mid):
            logger.debug("row %d: taking item %d (%.2f vs %.2f)", start, index, height, last_height)
            return index + 1
        logger.debug("row %d: closing before item %d (%.2f vs %.2f)", start, index, last_height, height)
        return last_end

    return len(ratios)


def _close_row(ratios: Sequence[float], start: int, end: int, params: GridParams) -> Row:
    aspect_sum = math.fsum(ratios[start:end])
    solved = solve_row_height(
        aspect_sum=aspect_sum,
        count=end - start,
        full_width=params.full_width,
        gap=params.gap,
    )
    height = clamp_height(solved, min_height=params.min_height, max_height=params.max_height)
    return Row(start=start, end=end, aspect_sum=aspect_sum, solved_height=solved, height=height)


def build_rows(ratios: Iterable[float], params: GridParams) -> List[Row]:
    """Partition ``ratios`` into rows, in order, and resolve each height.

    Raises InvalidInput before doing any work when ratios or params are bad.
    """

    params = params.validate()
    values = validate_ratios(ratios)

    rows: List[Row] = []
    start = 0
    while start < len(values):
        end = _row_boundary(values, start, params)
        row = _close_row(values, start, end, params)
        rows.append(row)
        start = row.end

    logger.debug("packed %d items into %d rows", len(values), len(rows))
    return rows
