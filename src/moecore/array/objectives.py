from __future__ import annotations

from typing import Callable

import numpy as np

from moecore.core.contracts import Constraint, Objective

from .solution import ArraySolution


class ArrayFObjective(Objective[ArraySolution]):
    """Objective ``index_f`` of an evaluated ArraySolution (minimized)."""

    def __init__(self, index_f: int, target: float | None = None) -> None:
        self.index_f = int(index_f)
        self.target = None if target is None else float(target)

    def value(self, candidate: ArraySolution) -> float:
        return float(candidate.f[self.index_f])

    def good_enough(self, val: float) -> bool:
        if self.target is None:
            return False
        return val <= self.target

    def __repr__(self) -> str:
        return f"ArrayFObjective(index_f={self.index_f}, target={self.target})"


class ArrayFunctionConstraint(Constraint[ArraySolution]):
    """
    Constraint ``g(x) <= 0`` over the decision vector.

    ``func`` returns the signed violation; positive values are infeasible.
    """

    def __init__(self, func: Callable[[np.ndarray], float], name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", "constraint")

    def violation(self, candidate: ArraySolution) -> float:
        return float(self._func(candidate.x))

    def __repr__(self) -> str:
        return f"ArrayFunctionConstraint({self.name})"


__all__ = ["ArrayFObjective", "ArrayFunctionConstraint"]
