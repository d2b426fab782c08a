"""
Evaluator plug-in contract for real-valued problems.

An evaluator describes one box-constrained problem: the decision-vector
length, the number of objectives, one lower/upper bound shared by every
variable, and a fitness function that writes the objective vector in place.

Example::

    import numpy as np
    from moecore.problem import ArraySolutionEvaluator

    class Sphere2(ArraySolutionEvaluator):
        def x_len(self) -> int:
            return 3

        def objectives_len(self) -> int:
            return 2

        def min_x_value(self) -> float:
            return 0.0

        def max_x_value(self) -> float:
            return 1.0

        def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
            f[0] = np.sum(x ** 2)
            f[1] = np.sum((x - 1.0) ** 2)
"""

from __future__ import annotations

import copy
import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Sequence

import numpy as np

from moecore.foundation.exceptions import DimensionMismatchError, InvalidConfigurationError

_logger = logging.getLogger(__name__)


class ArraySolutionEvaluator(ABC):
    """
    Base class for fitness plug-ins.

    Every solution holds its own ``duplicate()`` of the evaluator, so
    implementations must not rely on shared mutable state.
    """

    @abstractmethod
    def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
        """Fill ``f`` (length ``objectives_len()``) from ``x``. Must not resize ``f``."""
        raise NotImplementedError

    @abstractmethod
    def x_len(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def objectives_len(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def min_x_value(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def max_x_value(self) -> float:
        raise NotImplementedError

    def duplicate(self) -> ArraySolutionEvaluator:
        """Independent handle for a solution to own."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x_len={self.x_len()}, objectives_len={self.objectives_len()}, "
            f"bounds=[{self.min_x_value()}, {self.max_x_value()}])"
        )


class FunctionEvaluator(ArraySolutionEvaluator):
    """
    Evaluator wrapping a plain function ``func(x) -> sequence of objectives``.

    The returned sequence must have exactly ``objectives_len`` entries. Sizes
    and bounds are checked on construction.
    """

    def __init__(
        self,
        func: Callable[[np.ndarray], Sequence[float] | np.ndarray],
        x_len: int,
        objectives_len: int,
        min_x_value: float,
        max_x_value: float,
    ) -> None:
        self._func = func
        self._x_len = int(x_len)
        self._objectives_len = int(objectives_len)
        self._min_x_value = float(min_x_value)
        self._max_x_value = float(max_x_value)
        check_declared_shape(self._x_len, self._objectives_len, self._min_x_value, self._max_x_value)

    def calculate_objectives(self, x: np.ndarray, f: np.ndarray) -> None:
        values = np.asarray(self._func(x), dtype=float).reshape(-1)
        if values.shape[0] != self._objectives_len:
            raise DimensionMismatchError(
                f"Objective function returned {values.shape[0]} values, expected {self._objectives_len}.",
                expected=self._objectives_len,
                actual=int(values.shape[0]),
            )
        f[:] = values

    def x_len(self) -> int:
        return self._x_len

    def objectives_len(self) -> int:
        return self._objectives_len

    def min_x_value(self) -> float:
        return self._min_x_value

    def max_x_value(self) -> float:
        return self._max_x_value

    def duplicate(self) -> FunctionEvaluator:
        # Functions are shared; only the declared shape is per-instance.
        return FunctionEvaluator(self._func, self._x_len, self._objectives_len, self._min_x_value, self._max_x_value)


def check_declared_shape(x_len: int, n_obj: int, lo: float, hi: float) -> None:
    """Reject declared sizes and bounds no operator can work with."""
    if x_len <= 0:
        raise InvalidConfigurationError(
            f"Decision vector length must be positive, got {x_len}.",
            "The per-gene mutation probability 1/n is undefined for n = 0",
            x_len=x_len,
        )
    if n_obj <= 0:
        raise InvalidConfigurationError(
            f"At least one objective is required, got {n_obj}.",
            objectives_len=n_obj,
        )
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidConfigurationError(
            f"Bounds must be finite, got [{lo}, {hi}].",
            min_x_value=lo,
            max_x_value=hi,
        )
    if lo > hi:
        raise InvalidConfigurationError(
            f"Lower bound {lo} is greater than upper bound {hi}.",
            "Ensure min_x_value() <= max_x_value()",
            min_x_value=lo,
            max_x_value=hi,
        )


def validate_evaluator(evaluator: ArraySolutionEvaluator) -> None:
    """
    Fail fast on evaluators that would corrupt a run later.

    Checks the declared lengths and bounds, then evaluates the mid-point of the
    box once to make sure the fitness function agrees with the declared sizes.
    """
    x_len = int(evaluator.x_len())
    n_obj = int(evaluator.objectives_len())
    lo = float(evaluator.min_x_value())
    hi = float(evaluator.max_x_value())
    check_declared_shape(x_len, n_obj, lo, hi)

    x = np.full(x_len, 0.5 * (lo + hi), dtype=float)
    f = np.full(n_obj, np.nan, dtype=float)
    try:
        evaluator.calculate_objectives(x, f)
    except DimensionMismatchError:
        raise
    except (IndexError, ValueError) as exc:
        raise DimensionMismatchError(
            f"Mid-point evaluation failed for x_len={x_len}, objectives_len={n_obj}: {exc}",
        ) from exc
    if f.shape != (n_obj,):
        raise DimensionMismatchError(
            f"calculate_objectives resized the objective vector to {f.shape}.",
            expected=n_obj,
            actual=int(f.size),
        )
    unwritten = int(np.count_nonzero(np.isnan(f)))
    if unwritten:
        raise DimensionMismatchError(
            f"calculate_objectives left {unwritten} of {n_obj} objectives unset.",
            expected=n_obj,
            actual=n_obj - unwritten,
        )
    _logger.debug("Validated %r", evaluator)


__all__ = ["ArraySolutionEvaluator", "FunctionEvaluator", "check_declared_shape", "validate_evaluator"]
