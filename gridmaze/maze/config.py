"""Immutable maze configuration and its YAML loader."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..base import InvalidMazeError
from ..generation import GeneratorType

PathLike = Union[str, Path]


class Placement(Enum):
    FIRST = "first"
    LAST = "last"
    RANDOM = "random"
    POSITION = "position"


@dataclass(frozen=True)
class GoalPlacement:
    """Where an entrance or exit goes."""

    kind: Placement
    row: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def first(cls) -> "GoalPlacement":
        return cls(Placement.FIRST)

    @classmethod
    def last(cls) -> "GoalPlacement":
        return cls(Placement.LAST)

    @classmethod
    def random(cls) -> "GoalPlacement":
        return cls(Placement.RANDOM)

    @classmethod
    def at(cls, row: int, column: int) -> "GoalPlacement":
        return cls(Placement.POSITION, row, column)

    @classmethod
    def parse(cls, value: Any) -> "GoalPlacement":
        """Accept ``"first"``, ``"last"``, ``"random"``, ``"r,c"``, ``[r, c]`` or a row/column mapping."""

        if isinstance(value, GoalPlacement):
            return value
        try:
            if isinstance(value, Mapping):
                return cls.at(int(value["row"]), int(value["column"]))
            if isinstance(value, (list, tuple)):
                row, column = value
                return cls.at(int(row), int(column))
            text = str(value).strip().lower()
            if text in (Placement.FIRST.value, Placement.LAST.value, Placement.RANDOM.value):
                return cls(Placement(text))
            row, column = text.split(",")
            return cls.at(int(row), int(column))
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidMazeError(f"Unrecognised goal placement {value!r}") from exc


@dataclass(frozen=True)
class MazeConfig:
    """Everything needed to build one maze.

    ``longest_path`` takes precedence over ``start`` and ``end``. The seed
    drives a single random source shared by generation and goal selection.
    """

    rows: int
    columns: int
    algorithm: Union[str, GeneratorType] = GeneratorType.SIDEWINDER
    start: GoalPlacement = GoalPlacement.first()
    end: GoalPlacement = GoalPlacement.last()
    longest_path: bool = False
    seed: Optional[int] = None
    sidewinder_bias: int = 50

    def generator_type(self) -> GeneratorType:
        try:
            return GeneratorType.parse(self.algorithm)
        except ValueError as exc:
            raise InvalidMazeError(str(exc)) from exc

    def validate(self) -> None:
        for name in ("rows", "columns", "sidewinder_bias"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidMazeError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.longest_path, bool):
            raise InvalidMazeError(f"longest_path must be true or false, got {self.longest_path!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidMazeError(f"seed must be an integer, got {self.seed!r}")
        for label, placement in (("start", self.start), ("end", self.end)):
            if not isinstance(placement, GoalPlacement):
                raise InvalidMazeError(f"{label} must be a goal placement, got {placement!r}")
        if self.rows <= 0:
            raise InvalidMazeError(f"Maze cannot be created with {self.rows} rows")
        if self.columns <= 0:
            raise InvalidMazeError(f"Maze cannot be created with {self.columns} columns")
        self.generator_type()
        if self.longest_path:
            return
        for label, placement in (("start", self.start), ("end", self.end)):
            if placement.kind is not Placement.POSITION:
                continue
            if placement.row is None or placement.column is None:
                raise InvalidMazeError(f"No position given for {label} cell")
            if not (0 <= placement.row < self.rows and 0 <= placement.column < self.columns):
                raise InvalidMazeError(
                    f"Cell at row {placement.row}, column {placement.column} does not exist "
                    f"within grid of size {self.rows}x{self.columns}"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MazeConfig":
        values = dict(data)
        if "cols" in values and "columns" not in values:
            values["columns"] = values.pop("cols")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidMazeError(f"Unknown configuration keys: {', '.join(unknown)}")
        if "rows" not in values or "columns" not in values:
            raise InvalidMazeError("No grid size specified.")
        for key in ("start", "end"):
            if key in values:
                values[key] = GoalPlacement.parse(values[key])
        return cls(**values)


def load_config(path: PathLike) -> MazeConfig:
    """Read a maze configuration from a YAML mapping."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise InvalidMazeError("Maze configuration must be a mapping")
    return MazeConfig.from_mapping(raw)


__all__ = ["Placement", "GoalPlacement", "MazeConfig", "load_config", "PathLike"]
