"""Observable shortest-path solving for built mazes."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..base import ObservableMazeAlgorithm
from ..grid.cells import Cell, CellGraph
from ..grid.distances import DistanceMap, distances_from, path_between

if TYPE_CHECKING:
    from .builder import Maze


class MazeSolver(ObservableMazeAlgorithm):
    """Breadth-first solver that reports one step per cell it reaches."""

    def distances(self, graph: CellGraph, root: Cell) -> DistanceMap:
        with self.observed_run():
            return distances_from(graph, root, on_visit=lambda _cell: self.completed_step())

    def solve(self, maze: "Maze") -> List[Cell]:
        """Path from the maze's start to its end; empty when unreachable."""

        return path_between(self.distances(maze.graph, maze.start), maze.end)


__all__ = ["MazeSolver"]
