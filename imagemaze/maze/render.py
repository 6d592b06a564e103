"""Cell grid to two-colour indexed raster."""
from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

from .cells import PASSAGE, WALL, Grid
from .errors import MissingGrid

RGB = Tuple[int, int, int]

# index 0 = passage, index 1 = wall
PALETTE: Tuple[RGB, RGB] = ((0xFF, 0xFF, 0xFF), (0x00, 0x00, 0x00))

_INDEX = {PASSAGE: 0, WALL: 1}


class IndexedRaster(NamedTuple):
    width: int
    height: int
    pixels: bytes
    palette: Tuple[RGB, ...] = PALETTE


def render(cells: Optional[Grid]) -> IndexedRaster:
    """Map every cell to its palette index. Raises MissingGrid when ``cells`` is None."""
    if cells is None:
        raise MissingGrid()
    pixels = bytes(_INDEX[v] for v in cells.cells)
    return IndexedRaster(cells.width, cells.height, pixels)


__all__ = ["render", "IndexedRaster", "PALETTE"]
