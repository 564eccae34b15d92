"""Text and raster views of a cell graph."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .cells import Cell, CellGraph
from .distances import DistanceMap

IMAGE_MARGIN = 30

BACKGROUND_COLOR = (255, 255, 255)
WALL_COLOR = (0, 0, 0)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)

START_LABEL = "S"
END_LABEL = "E"


def _cell_label(
    cell: Cell,
    *,
    distances: Optional[DistanceMap],
    on_path: Optional[set],
    start: Optional[Cell],
    end: Optional[Cell],
) -> str:
    if on_path is not None and cell not in on_path:
        return ""
    if cell == start:
        return START_LABEL
    if cell == end:
        return END_LABEL
    if distances is not None:
        value = distances.distance(cell)
        if value is not None:
            return np.base_repr(value, 32)
    return ""


def to_ascii(
    graph: CellGraph,
    *,
    distances: Optional[DistanceMap] = None,
    path: Optional[Sequence[Cell]] = None,
    start: Optional[Cell] = None,
    end: Optional[Cell] = None,
    path_only: bool = False,
) -> str:
    """Draw the maze with ``+---+`` walls.

    Cell bodies show ``S``/``E`` for the goals and otherwise the base-32
    distance when ``distances`` is given. With ``path_only`` only cells on
    ``path`` are labelled.
    """

    on_path = set(path or ()) if path_only else None
    labels = {
        cell: _cell_label(cell, distances=distances, on_path=on_path, start=start, end=end)
        for cell in graph.cells()
    }
    # Cells widen uniformly when a label needs more than three characters.
    width = max([3] + [len(label) for label in labels.values()])
    lines = ["+" + ("-" * width + "+") * graph.columns]
    for row in graph.rows_of_cells():
        middle = "|"
        bottom = "+"
        for cell in row:
            east = graph.east(cell)
            south = graph.south(cell)
            middle += labels[cell].center(width)
            middle += " " if east is not None and graph.is_linked(cell, east) else "|"
            bottom += " " * width if south is not None and graph.is_linked(cell, south) else "-" * width
            bottom += "+"
        lines.append(middle)
        lines.append(bottom)
    return "\n".join(lines) + "\n"


def distance_colors(distances: DistanceMap) -> np.ndarray:
    """Shade each cell green, darker as it gets further from the root.

    Cells with no known distance and the root itself stay white.
    """

    grid = distances.to_array()
    colors = np.full(grid.shape + (3,), 255, dtype=np.uint8)
    max_distance = distances.max_distance
    if max_distance == 0:
        return colors
    known = grid >= 0
    intensity = (max_distance - grid[known]) / max_distance
    dark = np.round(255 * intensity)
    bright = 128 + np.round(127 * intensity)
    colors[known] = np.stack([dark, bright, dark], axis=-1).astype(np.uint8)
    root = distances.root
    colors[root.row, root.column] = BACKGROUND_COLOR
    return colors


def _cell_box(cell: Cell, cell_size: int) -> Tuple[int, int, int, int]:
    left = IMAGE_MARGIN + cell.column * cell_size
    top = IMAGE_MARGIN + cell.row * cell_size
    return left, top, left + cell_size, top + cell_size


def render_image(
    graph: CellGraph,
    *,
    cell_size: int = 10,
    distances: Optional[DistanceMap] = None,
    path: Optional[Sequence[Cell]] = None,
    start: Optional[Cell] = None,
    end: Optional[Cell] = None,
) -> Image.Image:
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    width = graph.columns * cell_size + 2 * IMAGE_MARGIN
    height = graph.rows * cell_size + 2 * IMAGE_MARGIN
    canvas = Image.new("RGB", (width, height), BACKGROUND_COLOR)

    if distances is not None:
        cells = distance_colors(distances)
        pixels = np.repeat(np.repeat(cells, cell_size, axis=0), cell_size, axis=1)
        canvas.paste(Image.fromarray(pixels), (IMAGE_MARGIN, IMAGE_MARGIN))

    draw = ImageDraw.Draw(canvas)
    for cell, color in ((start, START_COLOR), (end, GOAL_COLOR)):
        if cell is not None:
            left, top, right, bottom = _cell_box(cell, cell_size)
            draw.rectangle((left, top, right - 1, bottom - 1), fill=color)

    if path:
        thickness = max(2, cell_size // 3)
        points = [
            (
                IMAGE_MARGIN + cell.column * cell_size + cell_size / 2,
                IMAGE_MARGIN + cell.row * cell_size + cell_size / 2,
            )
            for cell in path
        ]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            half = thickness / 2
            draw.ellipse((x - half, y - half, x + half, y + half), fill=LINE_COLOR)

    line_width = max(1, cell_size // 15)
    for cell in graph.cells():
        left, top, right, bottom = _cell_box(cell, cell_size)
        if graph.north(cell) is None:
            draw.line((left, top, right, top), fill=WALL_COLOR, width=line_width)
        if graph.west(cell) is None:
            draw.line((left, top, left, bottom), fill=WALL_COLOR, width=line_width)
        east = graph.east(cell)
        if east is None or not graph.is_linked(cell, east):
            draw.line((right, top, right, bottom), fill=WALL_COLOR, width=line_width)
        south = graph.south(cell)
        if south is None or not graph.is_linked(cell, south):
            draw.line((left, bottom, right, bottom), fill=WALL_COLOR, width=line_width)
    return canvas


__all__ = ["to_ascii", "distance_colors", "render_image"]
