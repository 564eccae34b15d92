"""Common scaffolding for maze-generation algorithms."""

from __future__ import annotations

import logging
import random
from abc import abstractmethod
from typing import Optional

from ..base import ObservableMazeAlgorithm
from ..grid.cells import Cell, CellGraph

logger = logging.getLogger(__name__)


class MazeGenAlgorithm(ObservableMazeAlgorithm):
    """Turns an unlinked grid into a maze by adding links in place.

    Subclasses implement ``_carve`` and call ``_link`` for every passage they
    open, which notifies observers of one step per link.
    """

    name = "generator"

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random(seed)

    def apply(self, graph: CellGraph) -> None:
        logger.debug(
            "Applying %s to %dx%d grid", self.name, graph.rows, graph.columns
        )
        with self.observed_run():
            self._carve(graph)
        logger.debug("%s finished with %d links", self.name, graph.link_count)

    @abstractmethod
    def _carve(self, graph: CellGraph) -> None:
        """Populate the links of ``graph``."""

    def _link(self, graph: CellGraph, a: Cell, b: Cell) -> None:
        graph.link(a, b)
        self.completed_step()


__all__ = ["MazeGenAlgorithm"]
