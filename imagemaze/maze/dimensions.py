"""Caller-side sizing rules for maze grids.

The carver assumes odd dimensions within [MIN_DIM, MAX_DIM]. Requests are
brought into that range here: clamp first, then bump even values by one so
the border closes cleanly.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

from .errors import InvalidDimension

MIN_DIM = 11
MAX_DIM = 501


def clamp(lo: int, hi: int) -> Callable[[int], int]:
    def _clamp(v: int) -> int:
        if v < lo:
            return lo
        if v > hi:
            return hi
        return v

    return _clamp


def make_odd(v: int) -> int:
    return v + 1 if v % 2 == 0 else v


def normalize_dimension(v: int, lo: int = MIN_DIM, hi: int = MAX_DIM) -> int:
    return make_odd(clamp(lo, hi)(v))


def check_dimensions(width: int, height: int, lo: int = MIN_DIM, hi: int = MAX_DIM) -> None:
    """Raise InvalidDimension unless both values are odd and within [lo, hi]."""
    for field, value in (("width", width), ("height", height)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDimension(field, value, f"{field} must be an integer, got {value!r}")
        if value < lo or value > hi:
            raise InvalidDimension(field, value, f"{field} {value} outside [{lo},{hi}]")
        if value % 2 == 0:
            raise InvalidDimension(field, value, f"{field} {value} must be odd")


def resolve_dimensions(
    src_width: int,
    src_height: int,
    custom_size: bool = False,
    width: Optional[int] = None,
    height: Optional[int] = None,
    lo: int = MIN_DIM,
    hi: int = MAX_DIM,
) -> Tuple[int, int]:
    """Work out the maze size for a source image and the requested size.

    Without a custom size the maze follows the image width (clamped) and keeps
    its aspect ratio. With a custom size, a missing side is derived from the
    other through the aspect ratio. The result is always odd.
    """
    cl = clamp(lo, hi)
    if custom_size and width is not None and height is not None:
        w, h = cl(width), cl(height)
    elif custom_size and width is not None:
        w = cl(width)
        h = cl(int(w * (src_height / src_width)))
    elif custom_size and height is not None:
        h = cl(height)
        w = cl(int(h * (src_width / src_height)))
    else:
        w = cl(src_width)
        h = cl(int(w * (src_height / src_width)))
    return make_odd(w), make_odd(h)


__all__ = [
    "MIN_DIM",
    "MAX_DIM",
    "clamp",
    "make_odd",
    "normalize_dimension",
    "check_dimensions",
    "resolve_dimensions",
]
