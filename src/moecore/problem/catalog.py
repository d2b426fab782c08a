"""Ready-made evaluators for examples and tests."""

from __future__ import annotations

import numpy as np

from moecore.foundation.exceptions import InvalidConfigurationError
from moecore.foundation.registry import Registry

from .evaluator import ArraySolutionEvaluator, check_declared_shape

EVALUATORS: Registry[type[ArraySolutionEvaluator]] = Registry("evaluators")


class _UnitBoxEvaluator(ArraySolutionEvaluator):
    """Shared plumbing for problems defined on ``[0, 1]^n``."""

    n_obj = 2

    def __init__(self, n_var: int) -> None:
        self.n_var = int(n_var)
        check_declared_shape(self.n_var, self.n_obj, 0.0, 1.0)

    def x_len(self) -> int:
        return self.n_var

    def objectives_len(self) -> int:
        return self.n_obj

    def min_x_value(self) -> float:
        return 0.0

    def max_x_value(self) -> float:
        return 1.0


@EVALUATORS.register("linear_sum")
class LinearSumEvaluator(_UnitBoxEvaluator):
    """
    Two conflicting linear objectives: ``f0 = sum(x)`` and ``f1 = sum(1 - x)``.

    Every point of the box is Pareto optimal, which makes it handy for checking
    plumbing rather than search quality.
    """

    def __init__(self, n_var: int = 3) -> None:
        super().__init__(n_var)

    def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
        f[0] = np.sum(x)
        f[1] = np.sum(1.0 - x)


@EVALUATORS.register("zdt1")
class ZDT1Evaluator(_UnitBoxEvaluator):
    """ZDT1: convex Pareto front at ``g = 1``."""

    def __init__(self, n_var: int = 30) -> None:
        if n_var < 2:
            raise InvalidConfigurationError(f"ZDT1 needs at least 2 variables, got {n_var}.", n_var=n_var)
        super().__init__(n_var)

    def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
        f1 = x[0]
        g = 1.0 + 9.0 * np.mean(x[1 : self.n_var])
        f[0] = f1
        f[1] = g * (1.0 - np.sqrt(f1 / g))


@EVALUATORS.register("zdt2")
class ZDT2Evaluator(_UnitBoxEvaluator):
    """
    ZDT2: concave Pareto front.
    Shares structure with ZDT1 but uses a quadratic term in the second objective.
    """

    def __init__(self, n_var: int = 30) -> None:
        if n_var < 2:
            raise InvalidConfigurationError(f"ZDT2 needs at least 2 variables, got {n_var}.", n_var=n_var)
        super().__init__(n_var)

    def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
        f1 = x[0]
        g = 1.0 + 9.0 * np.mean(x[1 : self.n_var])
        f[0] = f1
        f[1] = g * (1.0 - (f1 / g) ** 2)


def make_evaluator(name: str, **kwargs) -> ArraySolutionEvaluator:
    try:
        cls = EVALUATORS.get(name)
    except KeyError as exc:
        raise InvalidConfigurationError(
            f"Unknown evaluator '{name}'.",
            f"Available evaluators: {', '.join(EVALUATORS.names())}",
            name=name,
        ) from exc
    return cls(**kwargs)


__all__ = ["EVALUATORS", "LinearSumEvaluator", "ZDT1Evaluator", "ZDT2Evaluator", "make_evaluator"]
