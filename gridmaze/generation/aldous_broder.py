"""Aldous-Broder maze generation."""

from __future__ import annotations

from ..grid.cells import CellGraph
from .base import MazeGenAlgorithm


class AldousBroder(MazeGenAlgorithm):
    """Random walk that links each cell the first time it is entered.

    Samples uniformly from all spanning trees of the grid. Runtime is only
    bounded in probability.
    """

    name = "aldous_broder"

    def _carve(self, graph: CellGraph) -> None:
        current = graph.random_cell(self._rng)
        visited = {current}
        while len(visited) < graph.cell_count:
            neighbor = graph.random_neighbor(current, self._rng)
            if neighbor not in visited:
                self._link(graph, neighbor, current)
                visited.add(neighbor)
            current = neighbor


__all__ = ["AldousBroder"]
