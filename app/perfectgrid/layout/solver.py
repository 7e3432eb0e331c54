"""Row height solver."""

from __future__ import annotations

from app.perfectgrid.errors import DegenerateRow


def solve_row_height(*, aspect_sum: float, count: int, full_width: float, gap: float) -> float:
    """Height at which ``count`` items fill ``full_width`` exactly.

    A row of items rendered at height h is ``h * aspect_sum`` wide plus
    ``gap`` between each neighbouring pair:

        h * aspect_sum + gap * (count - 1) = full_width
    """

    if count < 1:
        raise DegenerateRow("row must contain at least one item")
    if aspect_sum <= 0:
        raise DegenerateRow("row aspect sum must be > 0")

    return (full_width - gap * (count - 1)) / aspect_sum
