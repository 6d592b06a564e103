"""Per-request maze generation.

A ``Maze`` owns one intensity grid and, once generated, the carved cell grid
plus the metrics of that run. Nothing here is shared between instances, so
concurrent requests each build their own.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .carver import MazeCarver
from .cells import Grid
from .dimensions import MAX_DIM, MIN_DIM, check_dimensions
from .metrics import init_metrics
from .render import IndexedRaster, render


@dataclass
class Maze:
    intensity: Grid
    enable_metrics: bool = True
    min_dim: int = MIN_DIM
    max_dim: int = MAX_DIM
    cells: Optional[Grid] = field(default=None, init=False)
    metrics: Dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_image(cls, image, width: int, height: int, **kwargs) -> "Maze":
        """Resample a Pillow image to ``width`` x ``height`` and wrap it."""
        from imagemaze.imaging import intensity_grid

        return cls(intensity_grid(image, width, height), **kwargs)

    @property
    def width(self) -> int:
        return self.intensity.width

    @property
    def height(self) -> int:
        return self.intensity.height

    @property
    def generated(self) -> bool:
        return self.cells is not None

    def generate(self) -> Grid:
        check_dimensions(self.width, self.height, self.min_dim, self.max_dim)
        if self.enable_metrics:
            self.metrics = init_metrics()
            start = time.perf_counter()
        carver = MazeCarver(self.intensity, self.width, self.height)
        self.cells = carver.run().frozen()
        if self.enable_metrics:
            elapsed = int((time.perf_counter() - start) * 1000)
            self.metrics.update(carver.stats())
            self.metrics['phase_ms']['carve'] = elapsed
            self.metrics['runtime_ms'] = elapsed
        return self.cells

    def render(self) -> IndexedRaster:
        return render(self.cells)

    def to_png(self) -> bytes:
        from imagemaze.imaging import encode_png

        return encode_png(self.render())

    def to_data_uri(self) -> str:
        from imagemaze.imaging import to_data_uri

        return to_data_uri(self.to_png())


__all__ = ["Maze"]
