"""Maze assembly: grid creation, generation and entrance/exit selection."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from PIL import Image

from ..base import InvalidMazeError, MazeAlgorithmObserver
from ..generation import GeneratorType, create_generator
from ..grid.cells import Cell, CellGraph
from ..grid.distances import DistanceMap, distances_from, furthest_cell, shortest_path
from ..grid.render import render_image, to_ascii
from ..progress import ProgressBarObserver
from .config import GoalPlacement, MazeConfig, Placement, load_config

logger = logging.getLogger(__name__)


class Maze:
    """A generated cell graph together with its entrance and exit.

    The graph, start and end are fixed once built. ``display_path`` is an
    advisory annotation for views and does not touch the graph.
    """

    def __init__(self, graph: CellGraph, start: Cell, end: Cell) -> None:
        self._graph = graph
        self._start = start
        self._end = end
        self._display_path: Optional[List[Cell]] = None

    @property
    def graph(self) -> CellGraph:
        return self._graph

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def end(self) -> Cell:
        return self._end

    @property
    def display_path(self) -> Optional[List[Cell]]:
        return None if self._display_path is None else list(self._display_path)

    def apply_solution(self, path: Sequence[Cell]) -> None:
        self._display_path = list(path)

    def clear_solution(self) -> None:
        self._display_path = None

    def distances(self) -> DistanceMap:
        return distances_from(self._graph, self._start)

    def solve(self) -> List[Cell]:
        """Shortest path from start to end, or an empty list if there is none."""

        return shortest_path(self._graph, self._start, self._end)

    def to_ascii(self, *, show_distances: bool = False, path_only: bool = False) -> str:
        return to_ascii(
            self._graph,
            distances=self.distances() if show_distances else None,
            path=self._display_path,
            start=self._start,
            end=self._end,
            path_only=path_only and self._display_path is not None,
        )

    def render(self, *, cell_size: int = 10, show_distances: bool = False) -> Image.Image:
        return render_image(
            self._graph,
            cell_size=cell_size,
            distances=self.distances() if show_distances else None,
            path=self._display_path,
            start=self._start,
            end=self._end,
        )

    def __str__(self) -> str:
        return self.to_ascii()

    def __repr__(self) -> str:
        return (
            f"Maze({self._graph.rows}x{self._graph.columns}, "
            f"start={self._start!r}, end={self._end!r})"
        )


def longest_path_goals(graph: CellGraph, rng: random.Random) -> Tuple[Cell, Cell]:
    """Return ``(start, end)`` from two distance sweeps.

    The end is the cell furthest from a random probe and the start is the
    cell furthest from that end. This finds a diameter of tree-shaped
    (perfect) mazes; on graphs with cycles it is only a long path.
    """

    probe = graph.random_cell(rng)
    end = furthest_cell(distances_from(graph, probe))
    start = furthest_cell(distances_from(graph, end))
    return start, end


def _place(graph: CellGraph, placement: GoalPlacement, rng: random.Random) -> Cell:
    if placement.kind is Placement.FIRST:
        return graph.first_cell()
    if placement.kind is Placement.LAST:
        return graph.last_cell()
    if placement.kind is Placement.RANDOM:
        return graph.random_cell(rng)
    cell = graph.cell_at(placement.row, placement.column)
    if cell is None:
        raise InvalidMazeError(
            f"Cell at row {placement.row}, column {placement.column} does not exist "
            f"within grid of size {graph.rows}x{graph.columns}"
        )
    return cell


def build_maze(
    config: MazeConfig,
    *,
    observers: Iterable[MazeAlgorithmObserver] = (),
) -> Maze:
    """Build a maze from ``config``.

    The configuration is validated before any work is done, so either a
    complete maze is returned or ``InvalidMazeError`` is raised. Observers
    are attached to the generator for the duration of this build.
    """

    config.validate()
    kind = config.generator_type()
    rng = random.Random(config.seed)
    graph = CellGraph(config.rows, config.columns, rng=rng)

    options = {"heads_probability": config.sidewinder_bias} if kind is GeneratorType.SIDEWINDER else {}
    generator = create_generator(kind, rng=rng, **options)
    for observer in observers:
        generator.attach(observer)
    generator.apply(graph)

    if config.longest_path:
        start, end = longest_path_goals(graph, rng)
    else:
        start = _place(graph, config.start, rng)
        end = _place(graph, config.end, rng)
    logger.debug("Built %dx%d %s maze from %r to %r", graph.rows, graph.columns, kind.value, start, end)
    return Maze(graph, start, end)


__all__ = ["Maze", "build_maze", "longest_path_goals", "main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a rectangular maze")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with maze settings")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument(
        "--algorithm",
        choices=[kind.value for kind in GeneratorType],
        default=None,
    )
    parser.add_argument("--start", type=str, default=None, help="first, random or ROW,COL")
    parser.add_argument("--end", type=str, default=None, help="last, random or ROW,COL")
    parser.add_argument("--longest-path", action="store_true", help="Place start and end on a longest path")
    parser.add_argument("--bias", type=int, default=None, help="Sidewinder run-closing probability in percent")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--show-distances", action="store_true", help="Label cells with their distance from the start")
    parser.add_argument("--solve", action="store_true", help="Mark the shortest path from start to end")
    parser.add_argument("--image", type=Path, default=None, help="Also save a PNG of the maze")
    parser.add_argument("--cell-size", type=int, default=20)
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while carving")
    parser.add_argument("--verbose", action="store_true")
    return parser


def _config_from_args(args: argparse.Namespace) -> MazeConfig:
    base = load_config(args.config) if args.config is not None else MazeConfig(rows=10, columns=10)
    overrides = {
        "rows": args.rows,
        "columns": args.cols,
        "algorithm": args.algorithm,
        "start": GoalPlacement.parse(args.start) if args.start is not None else None,
        "end": GoalPlacement.parse(args.end) if args.end is not None else None,
        "sidewinder_bias": args.bias,
        "seed": args.seed,
    }
    if args.longest_path:
        overrides["longest_path"] = True
    return dataclasses.replace(base, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _config_from_args(args)
        config.validate()
        observers = []
        if args.progress:
            observers.append(ProgressBarObserver(total=config.rows * config.columns - 1))
        maze = build_maze(config, observers=observers)
    except (InvalidMazeError, FileNotFoundError) as exc:
        parser.error(str(exc))

    if args.solve:
        path = maze.solve()
        maze.apply_solution(path)
        logger.info("Solution length: %d cells", len(path))
    print(maze.to_ascii(show_distances=args.show_distances), end="")

    if args.image is not None:
        args.image.parent.mkdir(parents=True, exist_ok=True)
        maze.render(cell_size=args.cell_size, show_distances=args.show_distances).save(args.image)
        logger.info("Wrote %s", args.image)


if __name__ == "__main__":
    main()
