"""Candidate edges and the frontier they wait in.

The frontier is a max-priority queue over (weight, age): heaviest edge first,
and among equal weights the most recently discovered one. ``heapq`` is a
min-heap, so entries are keyed on the negated pair. Ages are unique within a
run, which keeps the key total and the pop order reproducible.
"""
from __future__ import annotations

import heapq
from typing import List, NamedTuple, Tuple


class CandidateEdge(NamedTuple):
    target: int  # flat index of the room to carve
    wall: int  # flat index of the wall joining it to the carved side
    age: int
    weight: int


class Frontier:
    __slots__ = ("_heap", "high_water")

    def __init__(self):
        self._heap: List[Tuple[int, int, CandidateEdge]] = []
        self.high_water = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, edge: CandidateEdge) -> None:
        heapq.heappush(self._heap, (-edge.weight, -edge.age, edge))
        if len(self._heap) > self.high_water:
            self.high_water = len(self._heap)

    def pop(self) -> CandidateEdge:
        """Remove and return the best edge. IndexError when empty."""
        return heapq.heappop(self._heap)[2]

    def peek(self) -> CandidateEdge:
        return self._heap[0][2]


__all__ = ["CandidateEdge", "Frontier"]
