"""Rectangular cell graph with fixed neighbors and mutable passages."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..base import GridInvariantError


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def row_delta(self) -> int:
        return self.value[0]

    @property
    def column_delta(self) -> int:
        return self.value[1]


# Neighbor iteration order used everywhere in the package.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    column: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.column)

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column})"


class CellGraph:
    """Grid of cells owning both the positional wiring and the link relation.

    Cells are plain coordinate values. Neighbor wiring is computed once at
    construction and never changes; only the link sets mutate. Links are
    stored per cell so ``is_linked`` is a set lookup, and ``link``/``unlink``
    always update both sides.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {rows}x{columns}"
            )
        self._rows = rows
        self._columns = columns
        self._rng = rng if rng is not None else random.Random()
        self._grid: List[List[Cell]] = [
            [Cell(r, c) for c in range(columns)] for r in range(rows)
        ]
        self._neighbors: Dict[Cell, Dict[Direction, Cell]] = {}
        self._links: Dict[Cell, Set[Cell]] = {}
        for cell in self.cells():
            wiring: Dict[Direction, Cell] = {}
            for direction in DIRECTIONS:
                other = self.cell_at(
                    cell.row + direction.row_delta,
                    cell.column + direction.column_delta,
                )
                if other is not None:
                    wiring[direction] = other
            self._neighbors[cell] = wiring
            self._links[cell] = set()

    # ------------------------------------------------------------------
    # Shape and enumeration

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def cell_count(self) -> int:
        return self._rows * self._columns

    @property
    def link_count(self) -> int:
        """Number of undirected links in the graph."""

        return sum(len(linked) for linked in self._links.values()) // 2

    def cells(self) -> List[Cell]:
        """Return every cell in row-major order."""

        return [cell for row in self._grid for cell in row]

    def rows_of_cells(self) -> List[List[Cell]]:
        return [list(row) for row in self._grid]

    def columns_of_cells(self) -> List[List[Cell]]:
        return [
            [self._grid[r][c] for r in range(self._rows)]
            for c in range(self._columns)
        ]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells())

    def __len__(self) -> int:
        return self.cell_count

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and cell in self._links

    # ------------------------------------------------------------------
    # Lookup

    def cell_at(self, row: int, column: int) -> Optional[Cell]:
        if 0 <= row < self._rows and 0 <= column < self._columns:
            return self._grid[row][column]
        return None

    def first_cell(self) -> Cell:
        return self._grid[0][0]

    def last_cell(self) -> Cell:
        return self._grid[self._rows - 1][self._columns - 1]

    def random_cell(self, rng: Optional[random.Random] = None) -> Cell:
        """Pick a cell uniformly, drawing the row before the column."""

        source = rng if rng is not None else self._rng
        row = source.randrange(self._rows)
        column = source.randrange(self._columns)
        return self._grid[row][column]

    # ------------------------------------------------------------------
    # Positional neighbors

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        return self._wiring(cell).get(direction)

    def north(self, cell: Cell) -> Optional[Cell]:
        return self.neighbor(cell, Direction.NORTH)

    def east(self, cell: Cell) -> Optional[Cell]:
        return self.neighbor(cell, Direction.EAST)

    def south(self, cell: Cell) -> Optional[Cell]:
        return self.neighbor(cell, Direction.SOUTH)

    def west(self, cell: Cell) -> Optional[Cell]:
        return self.neighbor(cell, Direction.WEST)

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Return the present neighbors in north, east, south, west order."""

        wiring = self._wiring(cell)
        return [wiring[d] for d in DIRECTIONS if d in wiring]

    def random_neighbor(
        self,
        cell: Cell,
        rng: Optional[random.Random] = None,
    ) -> Optional[Cell]:
        candidates = self.neighbors(cell)
        if not candidates:
            return None
        source = rng if rng is not None else self._rng
        return source.choice(candidates)

    # ------------------------------------------------------------------
    # Links

    def link(self, a: Cell, b: Cell) -> None:
        self._check_pair(a, b)
        self._links[a].add(b)
        self._links[b].add(a)

    def unlink(self, a: Cell, b: Cell) -> None:
        self._check_pair(a, b)
        self._links[a].discard(b)
        self._links[b].discard(a)

    def is_linked(self, a: Cell, b: Cell) -> bool:
        linked = self._links.get(a)
        return linked is not None and b in linked

    def links(self, cell: Cell) -> List[Cell]:
        """Return the cells linked to ``cell`` in neighbor order."""

        linked = self._links[self._own(cell)]
        return [other for other in self.neighbors(cell) if other in linked]

    # ------------------------------------------------------------------

    def _own(self, cell: Cell) -> Cell:
        if cell not in self:
            raise GridInvariantError(
                f"{cell!r} does not belong to this {self._rows}x{self._columns} grid"
            )
        return cell

    def _wiring(self, cell: Cell) -> Dict[Direction, Cell]:
        return self._neighbors[self._own(cell)]

    def _check_pair(self, a: Cell, b: Cell) -> None:
        self._own(a)
        self._own(b)
        if a == b:
            raise GridInvariantError(f"Cannot link {a!r} to itself")
        if b not in self._neighbors[a].values():
            raise GridInvariantError(f"{a!r} and {b!r} are not neighbors")

    def __str__(self) -> str:
        from .render import to_ascii

        return to_ascii(self)

    def __repr__(self) -> str:
        return f"CellGraph(rows={self._rows}, columns={self._columns}, links={self.link_count})"


__all__ = ["Cell", "CellGraph", "Direction", "DIRECTIONS"]
