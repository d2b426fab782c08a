"""Real-valued solution with uniform crossover and bounded uniform-reset mutation."""

from __future__ import annotations

import numpy as np

from moecore.core.contracts import Solution
from moecore.core.memory import MemoryTypedBuffer
from moecore.foundation.exceptions import DimensionMismatchError, PoolMisuseError
from moecore.foundation.ratio import Ratio
from moecore.problem.evaluator import ArraySolutionEvaluator

_FAIR_COIN = Ratio(1, 2)


class ArraySolution(Solution):
    """
    Decision vector ``x``, objective vector ``f`` and a private evaluator handle.

    ``f`` is only meaningful while ``evaluated`` is True; crossover and mutation
    clear the flag and leave re-evaluation to the runtime processor.
    """

    def __init__(
        self,
        x: np.ndarray,
        f: np.ndarray,
        array_evaluator: ArraySolutionEvaluator,
        evaluated: bool = False,
    ) -> None:
        self.x = x
        self.f = f
        self.array_evaluator = array_evaluator
        self.evaluated = evaluated

    def calculate_objectives(self) -> None:
        n_obj = self.array_evaluator.objectives_len()
        if self.f.shape != (n_obj,):
            self.f = np.empty(n_obj, dtype=float)
        if self.x.shape != (self.array_evaluator.x_len(),):
            raise DimensionMismatchError(
                f"Decision vector has shape {self.x.shape}, evaluator expects ({self.array_evaluator.x_len()},).",
                expected=self.array_evaluator.x_len(),
                actual=int(self.x.size),
            )
        self.array_evaluator.calculate_objectives(self.x, self.f)
        self.evaluated = True

    def crossover(self, buffer: MemoryTypedBuffer, other: ArraySolution, rng: np.random.Generator) -> None:
        """
        Uniform crossover.

        Both offspring start as copies of ``other``; each then takes every gene
        from ``self`` on its own fair coin. Offspring 1 replaces ``self`` and
        offspring 2 replaces ``other``. The parents' decision vectors go back
        to ``buffer``, so both must currently be owned through it; nothing is
        allocated or returned when that check fails.

        Crossing a solution with itself leaves it unchanged.
        """
        if other is self:
            return
        n = self.x.shape[0]
        if other.x.shape[0] != n:
            raise DimensionMismatchError(
                f"Cannot cross vectors of length {n} and {other.x.shape[0]}.",
                expected=n,
                actual=int(other.x.shape[0]),
            )
        if other.x is self.x:
            raise PoolMisuseError("Both parents hold the same decision vector.")
        for parent in (self, other):
            if not buffer.owns(parent.x):
                raise PoolMisuseError(
                    "Parent decision vector is not owned through this buffer.",
                    parent=repr(parent),
                )

        x1 = buffer.clone(other.x)
        x2 = buffer.clone(other.x)

        mask1 = _FAIR_COIN.sample_mask(rng, n)
        x1[mask1] = self.x[mask1]
        mask2 = _FAIR_COIN.sample_mask(rng, n)
        x2[mask2] = self.x[mask2]

        f1 = other.f.copy()
        f2 = other.f.copy()
        evaluator1 = other.array_evaluator.duplicate()
        evaluator2 = other.array_evaluator.duplicate()

        buffer.deallocate(self.x)
        buffer.deallocate(other.x)

        self.x, self.f, self.array_evaluator, self.evaluated = x1, f1, evaluator1, False
        other.x, other.f, other.array_evaluator, other.evaluated = x2, f2, evaluator2, False

    def mutate(self, buffer: MemoryTypedBuffer, rng: np.random.Generator) -> None:
        """Redraw each gene uniformly inside the bounds with probability 1/n."""
        n = self.x.shape[0]
        mask = Ratio(1, n).sample_mask(rng, n)
        if np.any(mask):
            lo = self.array_evaluator.min_x_value()
            hi = self.array_evaluator.max_x_value()
            self.x[mask] = rng.uniform(lo, hi, size=int(np.count_nonzero(mask)))
        self.evaluated = False

    def copy(self, buffer: MemoryTypedBuffer | None = None) -> ArraySolution:
        x = buffer.clone(self.x) if buffer is not None else self.x.copy()
        return ArraySolution(x, self.f.copy(), self.array_evaluator.duplicate(), self.evaluated)

    def release(self, buffer: MemoryTypedBuffer) -> None:
        """Give the decision vector back to ``buffer``; the solution is unusable afterwards."""
        buffer.deallocate(self.x)
        self.x = np.empty(0, dtype=float)
        self.evaluated = False

    def __repr__(self) -> str:
        state = "evaluated" if self.evaluated else "stale"
        return f"ArraySolution(x={np.array2string(self.x, precision=4)}, f={np.array2string(self.f, precision=4)}, {state})"


__all__ = ["ArraySolution"]
