"""Conversion between host numeric buffers and plain float sequences."""

from __future__ import annotations

import struct
from array import array
from typing import Any, Iterable, List

from app.perfectgrid.errors import InvalidInput

_FLOAT64 = struct.Struct("<d")


def ratios_from_buffer(buf: Any) -> List[float]:
    """Read ratios from whatever numeric container the host hands over.

    Accepts:
    - ``array.array`` with typecode ``d`` or ``f``
    - objects exposing the buffer protocol with a float format (``memoryview``,
      numpy arrays, ...)
    - raw ``bytes``/``bytearray`` of packed little-endian float64 values
    - any iterable of numbers

    Values are only converted here; range checks happen in the layout code.
    """

    if isinstance(buf, array):
        if buf.typecode not in ("d", "f"):
            raise InvalidInput(f"unsupported array typecode {buf.typecode!r}")
        return list(buf)

    if isinstance(buf, (bytes, bytearray)):
        if len(buf) % _FLOAT64.size:
            raise InvalidInput(
                f"byte buffer length {len(buf)} is not a multiple of {_FLOAT64.size}"
            )
        return [value for (value,) in _FLOAT64.iter_unpack(buf)]

    try:
        view = memoryview(buf)
    except TypeError:
        view = None

    if view is not None:
        fmt = view.format.lstrip("<=@")
        if fmt not in ("d", "f"):
            raise InvalidInput(f"unsupported buffer format {view.format!r}")
        if view.ndim == 1 and view.format == fmt:
            return view.tolist()
        try:
            return view.cast("B").cast(fmt).tolist()
        except TypeError as exc:
            raise InvalidInput("buffer must be 1-D or C-contiguous") from exc

    try:
        return list(buf)
    except TypeError as exc:
        raise InvalidInput(f"cannot read ratios from {type(buf).__name__}") from exc


def heights_to_buffer(heights: Iterable[float]) -> array:
    """Pack heights into an ``array('d')`` for hosts that want a typed buffer."""

    return array("d", heights)
