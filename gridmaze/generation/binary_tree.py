"""Binary tree maze generation."""

from __future__ import annotations

from ..grid.cells import CellGraph
from .base import MazeGenAlgorithm


class BinaryTree(MazeGenAlgorithm):
    """Link every cell to its north or east neighbor, chosen at random.

    Cells are visited in row-major order. The resulting maze has an
    unbroken corridor along the north row and the east column.
    """

    name = "binary_tree"

    def _carve(self, graph: CellGraph) -> None:
        for cell in graph.cells():
            candidates = [
                neighbor
                for neighbor in (graph.north(cell), graph.east(cell))
                if neighbor is not None
            ]
            if not candidates:
                continue
            self._link(graph, cell, self._rng.choice(candidates))


__all__ = ["BinaryTree"]
