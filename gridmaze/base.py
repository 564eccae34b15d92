"""Shared errors and observer interfaces for maze algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List


class GridInvariantError(RuntimeError):
    """Raised when a caller breaks a structural rule of a cell graph."""


class InvalidMazeError(ValueError):
    """Raised when a maze configuration cannot produce a valid maze."""

    MESSAGE_PREFIX = "Cannot build maze:"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.MESSAGE_PREFIX} {message}")


class MazeAlgorithmObserver:
    """Receives progress notifications from an observable algorithm.

    Every hook is optional; override only what you need. Hooks run inline
    with the algorithm and must not mutate the graph being worked on.
    """

    def on_start(self) -> None:
        """Called once before the algorithm does any work."""

    def on_step(self) -> None:
        """Called after each state-changing step of the algorithm."""

    def on_finish(self) -> None:
        """Called once when the algorithm completes."""


class ObservableMazeAlgorithm(ABC):
    """Base class for algorithms that report their progress to observers."""

    def __init__(self) -> None:
        self._observers: List[MazeAlgorithmObserver] = []

    @property
    def observers(self) -> List[MazeAlgorithmObserver]:
        """Return a snapshot of the attached observers in notification order."""

        return list(self._observers)

    def attach(self, observer: MazeAlgorithmObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: MazeAlgorithmObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @contextmanager
    def observed_run(self) -> Iterator[None]:
        """Bracket one execution with exactly one start and one finish notification."""

        for observer in list(self._observers):
            observer.on_start()
        try:
            yield
        finally:
            # Observers may detach themselves while finishing.
            for observer in list(self._observers):
                observer.on_finish()

    def completed_step(self) -> None:
        for observer in list(self._observers):
            observer.on_step()


class OneTimeObserver(MazeAlgorithmObserver, ABC):
    """Observer interested in a single run of one algorithm.

    The observer is not attached on construction. Once the observed run
    finishes it detaches itself, so later runs go unnoticed.
    """

    def __init__(self, algorithm: ObservableMazeAlgorithm) -> None:
        self.algorithm = algorithm
        self._finished = False

    @property
    def has_finished(self) -> bool:
        return self._finished

    def on_finish(self) -> None:
        self.on_algorithm_finish()
        self._finished = True
        self.algorithm.detach(self)

    @abstractmethod
    def on_algorithm_finish(self) -> None:
        """Run any logic needed once the observed algorithm is done."""


__all__ = [
    "GridInvariantError",
    "InvalidMazeError",
    "MazeAlgorithmObserver",
    "ObservableMazeAlgorithm",
    "OneTimeObserver",
]
