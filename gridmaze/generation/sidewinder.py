"""Sidewinder maze generation."""

from __future__ import annotations

import random
from typing import List, Optional

from ..grid.cells import Cell, CellGraph
from .base import MazeGenAlgorithm


class CoinFlip:
    """Biased coin; ``heads_probability`` is a percentage clamped to [0, 100]."""

    def __init__(self, rng: random.Random, heads_probability: int = 50) -> None:
        self.heads_probability = max(0, min(100, int(heads_probability)))
        self._rng = rng

    def is_heads(self) -> bool:
        return self._rng.randrange(100) < self.heads_probability

    def is_tails(self) -> bool:
        return not self.is_heads()


class Sidewinder(MazeGenAlgorithm):
    """Carve east-running runs, closing each by opening one cell to the north.

    Rows are scanned top to bottom and left to right. The coin is only
    flipped when the cell could go either way; a cell on the east boundary
    always closes its run and a cell on the north boundary always extends
    east. The north-east corner has no option and is skipped.
    """

    name = "sidewinder"

    def __init__(
        self,
        *,
        heads_probability: int = 50,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(rng=rng, seed=seed)
        self.coin = CoinFlip(self._rng, heads_probability)

    def _carve(self, graph: CellGraph) -> None:
        for row in graph.rows_of_cells():
            self._visit_row(graph, row)

    def _visit_row(self, graph: CellGraph, row: List[Cell]) -> None:
        run: List[Cell] = []
        for cell in row:
            run.append(cell)
            east = graph.east(cell)
            north = graph.north(cell)
            if east is None and north is None:
                continue
            close_run = east is None or (north is not None and self.coin.is_heads())
            if close_run:
                member = self._rng.choice(run)
                self._link(graph, member, graph.north(member))
                run.clear()
            else:
                self._link(graph, cell, east)


__all__ = ["Sidewinder", "CoinFlip"]
