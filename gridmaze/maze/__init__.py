"""Maze assembly and solving."""

__all__ = [
    "Maze",
    "MazeConfig",
    "GoalPlacement",
    "Placement",
    "MazeSolver",
    "build_maze",
    "load_config",
    "longest_path_goals",
]

from .config import GoalPlacement, MazeConfig, Placement, load_config
from .builder import Maze, build_maze, longest_path_goals
from .solver import MazeSolver
