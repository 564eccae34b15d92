"""Cell graph, distances and views."""

__all__ = [
    "Cell",
    "CellGraph",
    "Direction",
    "DistanceMap",
    "distances_from",
    "path_between",
    "furthest_cell",
    "shortest_path",
    "to_ascii",
    "render_image",
]

from .cells import Cell, CellGraph, Direction
from .distances import (
    DistanceMap,
    distances_from,
    path_between,
    furthest_cell,
    shortest_path,
)
from .render import to_ascii, render_image
