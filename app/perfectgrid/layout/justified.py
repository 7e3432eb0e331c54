"""Justified grid layout (container-first) helpers.

Nothing here touches a widget toolkit or the DOM; it only does arithmetic
on ratios and sizes.

Rows of media items, separated by a fixed gap, are sized so each row
spans the container width as closely as the height bounds allow. Callers
supply the container width and one aspect ratio per item.

UI layers (web/Qt) apply the result; nothing here measures or decodes
assets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from app.perfectgrid.layout.assemble import expand_rows, round_heights
from app.perfectgrid.layout.params import GridParams
from app.perfectgrid.layout.rows import Row, build_rows


@dataclass(frozen=True)
class JustifiedItem:
    """Input item for layout.

    aspect_ratio: width / height of the item's natural size.
    """

    key: str
    aspect_ratio: float


@dataclass(frozen=True)
class JustifiedPlacement:
    key: str
    row: int
    x: float
    y: float
    width: float
    height: float


def compute_rows(
    ratios: Iterable[float],
    *,
    full_width: float,
    min_height: float,
    max_height: float,
    min_item_width: float,
    gap: float,
) -> List[Row]:
    """Partition ratios into rows; see ``rows.build_rows``."""

    params = GridParams(
        full_width=full_width,
        min_height=min_height,
        max_height=max_height,
        min_item_width=min_item_width,
        gap=gap,
    )
    return build_rows(ratios, params)


def compute_heights(
    ratios: Iterable[float],
    *,
    full_width: float,
    min_height: float,
    max_height: float,
    min_item_width: float,
    gap: float,
    rounded: bool = False,
) -> Union[List[float], List[int]]:
    """Return one render height per ratio, in input order.

    Items of the same row share a height. With ``rounded=True`` heights are
    rounded to the nearest integer, halves away from zero.

    Raises InvalidInput for non-positive or non-finite ratios and for
    parameters outside their ranges.
    """

    ratios = list(ratios)
    rows = compute_rows(
        ratios,
        full_width=full_width,
        min_height=min_height,
        max_height=max_height,
        min_item_width=min_item_width,
        gap=gap,
    )
    heights = expand_rows(rows, len(ratios))
    if rounded:
        return round_heights(heights)
    return heights


def layout_justified(
    *,
    container_width_px: float,
    items: Iterable[JustifiedItem],
    min_height: float,
    max_height: float,
    min_item_width: float,
    gap: float,
) -> Tuple[List[JustifiedPlacement], float]:
    """Position every item of a justified grid.

    Each placement carries its row index, top-left corner and rendered size;
    the second value is the grid height from the first row's top to the
    last row's bottom.
    """

    items = list(items)
    rows = compute_rows(
        [item.aspect_ratio for item in items],
        full_width=container_width_px,
        min_height=min_height,
        max_height=max_height,
        min_item_width=min_item_width,
        gap=gap,
    )

    placements: List[JustifiedPlacement] = []
    y = 0.0
    for row_index, row in enumerate(rows):
        x = 0.0
        for item in items[row.start:row.end]:
            width = item.aspect_ratio * row.height
            placements.append(
                JustifiedPlacement(
                    key=item.key,
                    row=row_index,
                    x=x,
                    y=y,
                    width=width,
                    height=row.height,
                )
            )
            x += width + gap
        y += row.height + gap

    total = y - (gap if rows else 0.0)
    return placements, total
