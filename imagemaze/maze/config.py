from dataclasses import dataclass

from .dimensions import MAX_DIM, MIN_DIM


@dataclass
class MazeConfig:
    min_dim: int = MIN_DIM
    max_dim: int = MAX_DIM
    max_upload_bytes: int = 2 * 1024 * 1024
    enable_metrics: bool = True

    def __post_init__(self):
        # Bounds narrow the supported range; odd so a clamped size is a valid side
        if not MIN_DIM <= self.min_dim <= self.max_dim <= MAX_DIM:
            raise ValueError(
                f"dimension bounds {self.min_dim}..{self.max_dim} must lie within {MIN_DIM}..{MAX_DIM}"
            )
        if self.min_dim % 2 == 0 or self.max_dim % 2 == 0:
            raise ValueError(f"dimension bounds {self.min_dim}..{self.max_dim} must be odd")

    @classmethod
    def from_mapping(cls, cfg) -> "MazeConfig":
        """Build from a Flask config (or any mapping) using the MAZE_* keys."""
        return cls(
            min_dim=int(cfg.get("MAZE_MIN_DIM", cls.min_dim)),
            max_dim=int(cfg.get("MAZE_MAX_DIM", cls.max_dim)),
            max_upload_bytes=int(cfg.get("MAZE_MAX_UPLOAD_BYTES", cls.max_upload_bytes)),
            enable_metrics=bool(cfg.get("MAZE_ENABLE_METRICS", cls.enable_metrics)),
        )


__all__ = ["MazeConfig"]
