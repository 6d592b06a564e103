"""Public maze package interface."""

from .carver import MazeCarver, carve, start_room  # noqa: F401
from .cells import PASSAGE, WALL, Grid  # noqa: F401
from .config import MazeConfig  # noqa: F401
from .dimensions import (  # noqa: F401
    MAX_DIM,
    MIN_DIM,
    check_dimensions,
    normalize_dimension,
    resolve_dimensions,
)
from .errors import InvalidDimension, MazeError, MissingGrid  # noqa: F401
from .pipeline import Maze  # noqa: F401
from .render import PALETTE, IndexedRaster, render  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeCarver",
    "carve",
    "start_room",
    "render",
    "IndexedRaster",
    "PALETTE",
    "Grid",
    "PASSAGE",
    "WALL",
    "MIN_DIM",
    "MAX_DIM",
    "check_dimensions",
    "normalize_dimension",
    "resolve_dimensions",
    "MazeError",
    "InvalidDimension",
    "MissingGrid",
]
