"""Error types raised around maze generation.

The carver itself never raises for valid input; these are detected by its
callers (dimension checks before carving, render requests before carving).
"""


class MazeError(Exception):
    """Base class for maze generation errors."""


class InvalidDimension(MazeError, ValueError):
    def __init__(self, field: str, value, message: str):
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


class MissingGrid(MazeError):
    """Render requested before any carve completed."""

    def __init__(self, message: str = "nothing to render: maze has not been generated"):
        super().__init__(message)


__all__ = ["MazeError", "InvalidDimension", "MissingGrid"]
