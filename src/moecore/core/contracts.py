"""
Extensibility contract between solution encodings, evaluators and optimizers.

An external optimizer drives the generation loop; this module only fixes the
shapes every participant must have:

- ``Solution``: variation operators applied in place.
- ``Objective`` / ``Constraint``: scalar projections of an evaluated solution.
- ``Meta``: run parameters and the factory for fresh random solutions.
- ``SolutionsRuntimeProcessor``: per-generation hooks and the buffer factory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

import numpy as np

from moecore.foundation.ratio import Ratio

from .memory import MemoryTypedBuffer

S = TypeVar("S", bound="Solution")


class Solution(ABC):
    """
    A candidate solution that knows how to recombine and mutate itself.

    Both operations work in place and leave the objective vector stale; the
    runtime processor re-evaluates before objectives are read again.
    """

    @abstractmethod
    def crossover(self, buffer: MemoryTypedBuffer, other: Solution, rng: np.random.Generator) -> None:
        """Recombine with ``other``; afterwards ``self`` and ``other`` are the two offspring."""
        raise NotImplementedError

    @abstractmethod
    def mutate(self, buffer: MemoryTypedBuffer, rng: np.random.Generator) -> None:
        raise NotImplementedError


class Objective(ABC, Generic[S]):
    @abstractmethod
    def value(self, candidate: S) -> float:
        raise NotImplementedError

    @abstractmethod
    def good_enough(self, val: float) -> bool:
        """True when ``val`` is good enough to end the optimization early."""
        raise NotImplementedError


class Constraint(ABC, Generic[S]):
    """Feasibility measure. ``violation <= 0`` means the constraint holds."""

    @abstractmethod
    def violation(self, candidate: S) -> float:
        raise NotImplementedError

    def is_feasible(self, candidate: S) -> bool:
        return self.violation(candidate) <= 0.0


class Meta(ABC, Generic[S]):
    """Immutable run parameters for an optimizer."""

    @property
    @abstractmethod
    def population_size(self) -> int: ...

    @property
    @abstractmethod
    def crossover_odds(self) -> Ratio: ...

    @property
    @abstractmethod
    def mutation_odds(self) -> Ratio: ...

    @property
    @abstractmethod
    def objectives(self) -> Sequence[Objective[S]]: ...

    @property
    @abstractmethod
    def constraints(self) -> Sequence[Constraint[S]]: ...

    @abstractmethod
    def random_solution(self, rng: np.random.Generator, buffer: MemoryTypedBuffer | None = None) -> S:
        raise NotImplementedError


class SolutionsRuntimeProcessor(ABC, Generic[S]):
    """
    Hooks an optimizer calls every generation, in this order:

    1. ``initialize_new_candidates`` on fresh solutions (evaluates them),
    2. ``iterate_solutions`` on the generation's population,
    3. ``iteration_num`` with the generation index,
    4. ``needs_early_stop`` at the generation boundary.

    ``create_solutions_memory_buffer`` is called once per run.
    """

    @abstractmethod
    def initialize_new_candidates(self, candidates: Sequence[S]) -> None:
        raise NotImplementedError

    def iterate_solutions(self, candidates: Sequence[S]) -> None:
        return None

    @abstractmethod
    def iteration_num(self, num: int) -> None:
        raise NotImplementedError

    def needs_early_stop(self) -> bool:
        return False

    @abstractmethod
    def create_solutions_memory_buffer(self) -> MemoryTypedBuffer:
        raise NotImplementedError


__all__ = ["Solution", "Objective", "Constraint", "Meta", "SolutionsRuntimeProcessor"]
