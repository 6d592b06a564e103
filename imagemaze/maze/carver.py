"""Weighted Prim-style carving of a perfect maze from an intensity grid.

Rooms sit on odd (x, y); the cells between them are walls that get opened
when their two rooms are joined. Carving starts at the centre room and keeps
a frontier of candidate edges from carved rooms to uncarved neighbours. The
edge weight comes from the image, ``4 * room + wall`` brightness, so bright
areas are carved ahead of dark ones and the maze follows the picture. Ties
go to the most recently discovered edge.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional

from .cells import PASSAGE, WALL, Coord2D, Grid
from .frontier import CandidateEdge, Frontier


class CarveStep(NamedTuple):
    room: Coord2D
    wall: Coord2D


def start_room(width: int, height: int) -> Coord2D:
    x, y = width // 2, height // 2
    if x % 2 == 0:
        x -= 1
    if y % 2 == 0:
        y -= 1
    return x, y


def edge_weight(intensity: Grid, room: int, wall: int) -> int:
    return 4 * intensity.cells[room] + intensity.cells[wall]


class MazeCarver:
    """One carving run. Holds the frontier and age counter for that run only."""

    def __init__(self, intensity: Grid, width: int, height: int):
        self.intensity = intensity
        self.width = width
        self.height = height
        self.frontier = Frontier()
        self.age = 0
        self.steps: List[CarveStep] = []
        self.edges_pushed = 0
        self.stale_edges = 0
        self.grid: Optional[Grid] = None

    def _push(self, maze: bytearray, target: int, wall: int) -> None:
        if maze[target] != WALL:
            return
        self.frontier.push(CandidateEdge(target, wall, self.age, edge_weight(self.intensity, target, wall)))
        self.age += 1
        self.edges_pushed += 1

    def _expand(self, maze: bytearray, p: int) -> None:
        w, h = self.width, self.height
        x, y = p % w, p // w
        # up, down, left, right; the wall is the cell between p and the room
        if y - 2 > 0:
            self._push(maze, p - 2 * w, p - w)
        if y + 2 < h:
            self._push(maze, p + 2 * w, p + w)
        if x - 2 > 0:
            self._push(maze, p - 2, p - 1)
        if x + 2 < w:
            self._push(maze, p + 2, p + 1)

    def run(self) -> Grid:
        w, h = self.width, self.height
        grid = Grid.filled(w, h, WALL)
        maze = grid.cells
        sx, sy = start_room(w, h)
        p = grid.index(sx, sy)
        maze[p] = PASSAGE
        self._expand(maze, p)
        while self.frontier:
            edge = self.frontier.pop()
            if maze[edge.target] == PASSAGE:
                self.stale_edges += 1
                continue
            maze[edge.target] = PASSAGE
            maze[edge.wall] = PASSAGE
            self.steps.append(CarveStep(grid.position(edge.target), grid.position(edge.wall)))
            p = edge.target
            self._expand(maze, p)
        self.grid = grid
        return grid

    def stats(self) -> Dict[str, int]:
        return {
            "rooms_carved": len(self.steps) + (1 if self.grid is not None else 0),
            "edges_pushed": self.edges_pushed,
            "stale_edges": self.stale_edges,
            "max_frontier": self.frontier.high_water,
        }


def carve(intensity: Grid, width: int, height: int) -> Grid:
    """Carve a perfect maze over a ``width`` x ``height`` intensity grid.

    Both dimensions must already be odd and within range; nothing is checked
    here. The returned grid holds ``PASSAGE``/``WALL`` per cell.
    """
    return MazeCarver(intensity, width, height).run()


__all__ = ["carve", "MazeCarver", "CarveStep", "start_room", "edge_weight"]
