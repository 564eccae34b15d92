"""Procedural maze generation, distances and entrance/exit selection."""

__all__ = [
    "GridInvariantError",
    "InvalidMazeError",
    "MazeAlgorithmObserver",
    "ObservableMazeAlgorithm",
    "OneTimeObserver",
    "Cell",
    "CellGraph",
    "Direction",
    "DistanceMap",
    "distances_from",
    "path_between",
    "furthest_cell",
    "shortest_path",
    "MazeGenAlgorithm",
    "BinaryTree",
    "Sidewinder",
    "AldousBroder",
    "WilsonsAlgorithm",
    "GeneratorType",
    "create_generator",
    "Maze",
    "MazeConfig",
    "GoalPlacement",
    "MazeSolver",
    "build_maze",
    "load_config",
]

from .base import (
    GridInvariantError,
    InvalidMazeError,
    MazeAlgorithmObserver,
    ObservableMazeAlgorithm,
    OneTimeObserver,
)
from .grid import (
    Cell,
    CellGraph,
    Direction,
    DistanceMap,
    distances_from,
    path_between,
    furthest_cell,
    shortest_path,
)
from .generation import (
    MazeGenAlgorithm,
    BinaryTree,
    Sidewinder,
    AldousBroder,
    WilsonsAlgorithm,
    GeneratorType,
    create_generator,
)
from .maze import (
    Maze,
    MazeConfig,
    GoalPlacement,
    MazeSolver,
    build_maze,
    load_config,
)
