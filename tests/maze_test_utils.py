import random
from collections import deque

from imagemaze.maze import PASSAGE, Grid

DIRS = ((0, -2), (0, 2), (-2, 0), (2, 0))


def random_intensity(width, height, seed):
    rng = random.Random(seed)
    return Grid(width, height, bytes(rng.randrange(256) for _ in range(width * height)))


def flat_intensity(width, height, value=0):
    return Grid(width, height, bytes([value]) * (width * height))


def passage_rooms(grid):
    """Return set of (x,y) passage cells with both coordinates odd."""
    return {(x, y) for (x, y) in grid.coords(PASSAGE) if x % 2 == 1 and y % 2 == 1}


def room_neighbors(grid, x, y):
    """Rooms joined to (x,y) through an open wall."""
    out = []
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        wx, wy = x + dx // 2, y + dy // 2
        if grid.contains(nx, ny) and grid[nx, ny] == PASSAGE and grid[wx, wy] == PASSAGE:
            out.append((nx, ny))
    return out


def room_edge_count(grid):
    rooms = passage_rooms(grid)
    return sum(len(room_neighbors(grid, x, y)) for x, y in rooms) // 2


def reachable_rooms(grid, start):
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for n in room_neighbors(grid, x, y):
            if n not in vis:
                vis.add(n)
                q.append(n)
    return vis


def all_rooms(width, height):
    return {(x, y) for x in range(1, width, 2) for y in range(1, height, 2)}


def assert_perfect_maze(grid, start):
    """Rooms form a tree rooted at start covering every room of the grid."""
    rooms = passage_rooms(grid)
    assert rooms == all_rooms(grid.width, grid.height), "Not every room was carved"
    assert reachable_rooms(grid, start) == rooms, "Carved rooms are not connected"
    assert room_edge_count(grid) == len(rooms) - 1, "Room graph has a cycle"
    # Every open non-room cell is a wall between two carved rooms
    for x, y in grid.coords(PASSAGE):
        if x % 2 == 1 and y % 2 == 1:
            continue
        assert (x % 2) != (y % 2), f"Open cell {(x, y)} has two even coordinates"
        if x % 2 == 0:
            assert grid[x - 1, y] == PASSAGE and grid[x + 1, y] == PASSAGE
        else:
            assert grid[x, y - 1] == PASSAGE and grid[x, y + 1] == PASSAGE
