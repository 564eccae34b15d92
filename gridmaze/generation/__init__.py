"""Maze-generation algorithms and their registry."""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Optional, Type, Union

__all__ = [
    "MazeGenAlgorithm",
    "BinaryTree",
    "Sidewinder",
    "CoinFlip",
    "AldousBroder",
    "WilsonsAlgorithm",
    "erase_loop",
    "GeneratorType",
    "create_generator",
]

from .base import MazeGenAlgorithm
from .binary_tree import BinaryTree
from .sidewinder import Sidewinder, CoinFlip
from .aldous_broder import AldousBroder
from .wilsons import WilsonsAlgorithm, erase_loop


class GeneratorType(Enum):
    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    ALDOUS_BRODER = "aldous_broder"
    WILSONS = "wilsons"

    @classmethod
    def parse(cls, value: Union[str, "GeneratorType"]) -> "GeneratorType":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown generation algorithm '{value}' (expected one of: {choices})"
            ) from exc


_GENERATORS: Dict[GeneratorType, Type[MazeGenAlgorithm]] = {
    GeneratorType.BINARY_TREE: BinaryTree,
    GeneratorType.SIDEWINDER: Sidewinder,
    GeneratorType.ALDOUS_BRODER: AldousBroder,
    GeneratorType.WILSONS: WilsonsAlgorithm,
}


def create_generator(
    kind: Union[str, GeneratorType] = GeneratorType.SIDEWINDER,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    **options,
) -> MazeGenAlgorithm:
    """Instantiate the generator registered for ``kind``.

    Extra keyword options are passed to the generator's constructor, e.g.
    ``heads_probability`` for Sidewinder.
    """

    generator_cls = _GENERATORS[GeneratorType.parse(kind)]
    return generator_cls(rng=rng, seed=seed, **options)
