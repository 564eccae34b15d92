"""Ready-made observers for reporting algorithm progress."""

from __future__ import annotations

import logging
from typing import Optional

from tqdm import tqdm

from .base import MazeAlgorithmObserver

logger = logging.getLogger(__name__)


class ProgressBarObserver(MazeAlgorithmObserver):
    """Show a tqdm bar that advances once per algorithm step.

    A perfect maze on ``n`` cells takes ``n - 1`` link steps, which is the
    natural ``total`` for generators.
    """

    def __init__(self, total: Optional[int] = None, *, desc: str = "carving", **tqdm_kwargs) -> None:
        self.total = total
        self.desc = desc
        self._tqdm_kwargs = tqdm_kwargs
        self._bar: Optional[tqdm] = None

    def on_start(self) -> None:
        self._bar = tqdm(total=self.total, desc=self.desc, unit="link", **self._tqdm_kwargs)

    def on_step(self) -> None:
        if self._bar is not None:
            self._bar.update(1)

    def on_finish(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class LoggingObserver(MazeAlgorithmObserver):
    """Log run boundaries and the number of steps taken."""

    def __init__(self, label: str, *, level: int = logging.DEBUG) -> None:
        self.label = label
        self.level = level
        self.steps = 0

    def on_start(self) -> None:
        self.steps = 0
        logger.log(self.level, "%s started", self.label)

    def on_step(self) -> None:
        self.steps += 1

    def on_finish(self) -> None:
        logger.log(self.level, "%s finished after %d steps", self.label, self.steps)


__all__ = ["ProgressBarObserver", "LoggingObserver"]
