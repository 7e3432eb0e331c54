"""Layout parameters and input validation.

All checks run before any row is built, so a bad call fails without doing
partial work.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Tuple

from app.perfectgrid.errors import InvalidInput


def _is_real(value: object) -> bool:
    # bool is an int subclass; True/False are never meaningful sizes.
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _require_finite(name: str, value: object) -> float:
    if not _is_real(value):
        raise InvalidInput(f"{name} must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInput(f"{name} must be finite")
    return number


@dataclass(frozen=True)
class GridParams:
    """The five scalars that shape a justified grid.

    full_width: container width to fill.
    min_height / max_height: allowed row height range.
    min_item_width: smallest acceptable rendered width of one item.
    gap: spacing between neighbouring items of a row.
    """

    full_width: float
    min_height: float
    max_height: float
    min_item_width: float
    gap: float = 0.0

    @property
    def mid_height(self) -> float:
        return (self.min_height + self.max_height) / 2.0

    def validate(self) -> "GridParams":
        """Return a float-normalized copy or raise InvalidInput."""

        full_width = _require_finite("full_width", self.full_width)
        min_height = _require_finite("min_height", self.min_height)
        max_height = _require_finite("max_height", self.max_height)
        min_item_width = _require_finite("min_item_width", self.min_item_width)
        gap = _require_finite("gap", self.gap)

        if full_width <= 0:
            raise InvalidInput("full_width must be > 0")
        if min_height <= 0:
            raise InvalidInput("min_height must be > 0")
        if min_height > max_height:
            raise InvalidInput("min_height must be <= max_height")
        if min_item_width <= 0:
            raise InvalidInput("min_item_width must be > 0")
        if gap < 0:
            raise InvalidInput("gap must be >= 0")
        if full_width < min_item_width:
            raise InvalidInput("full_width must be >= min_item_width")

        return GridParams(
            full_width=full_width,
            min_height=min_height,
            max_height=max_height,
            min_item_width=min_item_width,
            gap=gap,
        )


def validate_ratios(ratios: Iterable[float]) -> Tuple[float, ...]:
    """Materialize ratios as a tuple of positive finite floats."""

    out = []
    for index, ratio in enumerate(ratios):
        value = _require_finite(f"ratios[{index}]", ratio)
        if value <= 0:
            raise InvalidInput(f"ratios[{index}] must be > 0, got {value!r}")
        out.append(value)
    return tuple(out)
