"""Flat row-major grids shared by the carver and the renderer.

Both the intensity grid (brightness per cell, read only) and the cell grid
(wall/passage per cell, written by the carver) are a byte buffer plus its
width. ``index(x, y) = y * width + x``.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

PASSAGE = 0
WALL = 1

Coord2D = Tuple[int, int]
Buffer = Union[bytes, bytearray]


class Grid:
    """Fixed size 2-D view over a flat byte buffer."""

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, cells: Buffer):
        if len(cells) != width * height:
            raise ValueError(f"buffer holds {len(cells)} cells, expected {width}x{height}")
        self.width = width
        self.height = height
        self.cells = cells

    @classmethod
    def filled(cls, width: int, height: int, value: int) -> "Grid":
        return cls(width, height, bytearray([value]) * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        buf = bytearray()
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
            buf.extend(row)
        return cls(width, height, bytes(buf))

    @property
    def size(self) -> Coord2D:
        return self.width, self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def position(self, i: int) -> Coord2D:
        return i % self.width, i // self.width

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"({x},{y}) outside {self.width}x{self.height} grid")
        return self.cells[y * self.width + x]

    def set(self, x: int, y: int, value: int) -> None:
        if not self.contains(x, y):
            raise IndexError(f"({x},{y}) outside {self.width}x{self.height} grid")
        self.cells[y * self.width + x] = value

    def __getitem__(self, xy: Coord2D) -> int:
        return self.get(*xy)

    def __setitem__(self, xy: Coord2D, value: int) -> None:
        self.set(xy[0], xy[1], value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and bytes(self.cells) == bytes(other.cells)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def rows(self) -> Iterator[Buffer]:
        w = self.width
        for y in range(self.height):
            yield self.cells[y * w:(y + 1) * w]

    def coords(self, value: int) -> Iterable[Coord2D]:
        """Yield (x, y) of every cell holding ``value``."""
        for i, v in enumerate(self.cells):
            if v == value:
                yield self.position(i)

    def frozen(self) -> "Grid":
        return Grid(self.width, self.height, bytes(self.cells))

    def to_ascii(self, wall: str = "#", passage: str = ".") -> List[str]:
        return ["".join(wall if v == WALL else passage for v in row) for row in self.rows()]


__all__ = ["Grid", "PASSAGE", "WALL", "Coord2D"]
