"""Breadth-first distances over the link relation of a cell graph."""

from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from ..base import GridInvariantError
from .cells import Cell, CellGraph


class DistanceMap:
    """Read-only distances from one root cell.

    A cell without an entry has no known path to the root. Distances are
    kept in discovery order, which is also how ties are broken when looking
    for the furthest cell.
    """

    def __init__(self, graph: CellGraph, root: Cell, distances: Mapping[Cell, int]) -> None:
        self._graph = graph
        self._root = root
        self._distances = MappingProxyType(dict(distances))

    @property
    def graph(self) -> CellGraph:
        return self._graph

    @property
    def root(self) -> Cell:
        return self._root

    def distance(self, cell: Cell) -> Optional[int]:
        return self._distances.get(cell)

    def cells_with_known_distance(self) -> List[Cell]:
        return list(self._distances)

    def items(self) -> Iterator[Tuple[Cell, int]]:
        return iter(self._distances.items())

    def furthest(self) -> Tuple[Cell, int]:
        cell = max(self._distances, key=self._distances.__getitem__)
        return cell, self._distances[cell]

    @property
    def max_distance(self) -> int:
        return self.furthest()[1]

    def to_array(self) -> np.ndarray:
        """Distances laid out on the grid, with -1 where no distance is known."""

        grid = np.full((self._graph.rows, self._graph.columns), -1, dtype=np.int64)
        for cell, value in self._distances.items():
            grid[cell.row, cell.column] = value
        return grid

    def __contains__(self, cell: object) -> bool:
        return cell in self._distances

    def __len__(self) -> int:
        return len(self._distances)

    def __repr__(self) -> str:
        return f"DistanceMap(root={self._root!r}, known={len(self._distances)})"


def distances_from(
    graph: CellGraph,
    root: Cell,
    *,
    on_visit: Optional[Callable[[Cell], None]] = None,
) -> DistanceMap:
    """Compute link distances from ``root`` with a FIFO frontier.

    A cell is assigned a distance the first time it is discovered and is
    never revisited, so graphs with cycles are handled. ``on_visit`` is
    called for every cell that receives a distance other than the root.
    """

    if root not in graph:
        raise GridInvariantError(f"{root!r} does not belong to this {graph.rows}x{graph.columns} grid")
    distances: Dict[Cell, int] = {root: 0}
    frontier = deque([root])
    while frontier:
        current = frontier.popleft()
        for linked in graph.links(current):
            if linked in distances:
                continue
            distances[linked] = distances[current] + 1
            frontier.append(linked)
            if on_visit is not None:
                on_visit(linked)
    return DistanceMap(graph, root, distances)


def path_between(distances: DistanceMap, goal: Cell) -> List[Cell]:
    """Walk back from ``goal`` to the root; return the path root first.

    An empty list means there is no path. When several linked cells are one
    step closer, the first one in neighbor order is taken.
    """

    current_distance = distances.distance(goal)
    if current_distance is None:
        return []
    graph = distances.graph
    path = [goal]
    current = goal
    while current != distances.root:
        step = next(
            (
                linked
                for linked in graph.links(current)
                if distances.distance(linked) == current_distance - 1
            ),
            None,
        )
        if step is None:
            return []
        path.append(step)
        current = step
        current_distance -= 1
    path.reverse()
    return path


def furthest_cell(distances: DistanceMap) -> Cell:
    return distances.furthest()[0]


def shortest_path(graph: CellGraph, start: Cell, end: Cell) -> List[Cell]:
    return path_between(distances_from(graph, start), end)


__all__ = [
    "DistanceMap",
    "distances_from",
    "path_between",
    "furthest_cell",
    "shortest_path",
]
