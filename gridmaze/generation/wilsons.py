"""Wilson's algorithm: uniform spanning trees by loop-erased random walks."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..grid.cells import Cell, CellGraph
from .base import MazeGenAlgorithm


def erase_loop(path: Sequence[Cell], cell: Cell) -> List[Cell]:
    """Extend ``path`` with ``cell``, cutting out the loop if it was already on it.

    When ``cell`` is already on the path, everything after its first
    occurrence is dropped, so the result ends exactly at ``cell``.
    """

    if cell in path:
        return list(path[: list(path).index(cell) + 1])
    return list(path) + [cell]


def _take(unvisited: List[Cell], index: Dict[Cell, int], cell: Cell) -> None:
    # Swap with the last entry so removal does not shift the list.
    slot = index.pop(cell)
    last = unvisited.pop()
    if last is not cell:
        unvisited[slot] = last
        index[last] = slot


class WilsonsAlgorithm(MazeGenAlgorithm):
    """Grow a spanning tree from one seed cell with loop-erased random walks.

    Each walk starts from a random unvisited cell and wanders until it meets
    the tree. Loops are erased as they form, then the surviving path is
    linked into the tree.
    """

    name = "wilsons"

    def _carve(self, graph: CellGraph) -> None:
        unvisited: List[Cell] = graph.cells()
        index: Dict[Cell, int] = {cell: slot for slot, cell in enumerate(unvisited)}
        _take(unvisited, index, self._rng.choice(unvisited))

        while unvisited:
            cell = self._rng.choice(unvisited)
            path = [cell]
            on_path: Dict[Cell, int] = {cell: 0}
            while cell in index:
                cell = graph.random_neighbor(cell, self._rng)
                position = on_path.get(cell)
                if position is None:
                    on_path[cell] = len(path)
                    path.append(cell)
                else:
                    for erased in path[position + 1 :]:
                        del on_path[erased]
                    del path[position + 1 :]

            for current, following in zip(path, path[1:]):
                self._link(graph, current, following)
                _take(unvisited, index, current)


__all__ = ["WilsonsAlgorithm", "erase_loop"]
