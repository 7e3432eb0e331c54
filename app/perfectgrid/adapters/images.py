"""Read aspect ratios from image files.

Only headers are read: ``Image.open`` is lazy and pixel data is never
decoded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from PIL import Image, UnidentifiedImageError

from app.perfectgrid.errors import InvalidInput

logger = logging.getLogger(__name__)

# EXIF orientations 5-8 rotate the picture by 90 degrees.
_EXIF_ORIENTATION = 0x0112
_ROTATED_ORIENTATIONS = {5, 6, 7, 8}


def read_aspect_ratio(path: str | Path) -> float:
    """Return displayed width / height of the image at ``path``."""

    try:
        with Image.open(path) as img:
            width, height = img.size
            orientation = img.getexif().get(_EXIF_ORIENTATION)
    except (OSError, UnidentifiedImageError) as exc:
        raise InvalidInput(f"cannot read image size from {path}") from exc

    if width <= 0 or height <= 0:
        raise InvalidInput(f"image {path} has empty size {width}x{height}")

    if orientation in _ROTATED_ORIENTATIONS:
        logger.debug("%s: EXIF orientation %s, swapping width/height", path, orientation)
        width, height = height, width

    return width / height


def read_aspect_ratios(paths: Iterable[str | Path]) -> List[float]:
    return [read_aspect_ratio(p) for p in paths]
