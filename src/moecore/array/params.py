"""Run parameters for real-valued optimizers."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from moecore.core.contracts import Constraint, Meta
from moecore.core.memory import MemoryTypedBuffer
from moecore.foundation.exceptions import DimensionMismatchError, InvalidConfigurationError
from moecore.foundation.ratio import Ratio
from moecore.problem.evaluator import ArraySolutionEvaluator, validate_evaluator

from .objectives import ArrayFObjective
from .solution import ArraySolution

_logger = logging.getLogger(__name__)


class ArrayOptimizerParams(Meta[ArraySolution]):
    """
    Population size, variation rates, the problem evaluator and its objectives.

    One ``ArrayFObjective`` is derived per objective of the evaluator. Rates
    accept anything ``Ratio.parse`` understands; ``"1/n"`` resolves against the
    evaluator's decision-vector length.
    """

    def __init__(
        self,
        population_size: int,
        crossover_odds: Ratio | str | float,
        mutation_odds: Ratio | str | float,
        array_evaluator: ArraySolutionEvaluator,
        *,
        objective_targets: Sequence[float | None] | None = None,
        constraints: Sequence[Constraint[ArraySolution]] | None = None,
    ) -> None:
        validate_evaluator(array_evaluator)
        if population_size <= 0:
            raise InvalidConfigurationError(
                f"population_size must be positive, got {population_size}.",
                population_size=population_size,
            )
        n_var = array_evaluator.x_len()
        n_obj = array_evaluator.objectives_len()

        if objective_targets is None:
            objective_targets = [None] * n_obj
        elif len(objective_targets) != n_obj:
            raise DimensionMismatchError(
                f"Got {len(objective_targets)} objective targets for {n_obj} objectives.",
                expected=n_obj,
                actual=len(objective_targets),
            )

        self._population_size = int(population_size)
        self._crossover_odds = Ratio.parse(crossover_odds, n_var=n_var)
        self._mutation_odds = Ratio.parse(mutation_odds, n_var=n_var)
        self._array_evaluator = array_evaluator
        self._objectives = tuple(ArrayFObjective(i, target) for i, target in enumerate(objective_targets))
        self._constraints = tuple(constraints or ())
        _logger.debug(
            "Parameters: population=%d crossover=%s mutation=%s objectives=%d constraints=%d",
            self._population_size,
            self._crossover_odds,
            self._mutation_odds,
            len(self._objectives),
            len(self._constraints),
        )

    @property
    def population_size(self) -> int:
        return self._population_size

    @property
    def crossover_odds(self) -> Ratio:
        return self._crossover_odds

    @property
    def mutation_odds(self) -> Ratio:
        return self._mutation_odds

    @property
    def array_evaluator(self) -> ArraySolutionEvaluator:
        return self._array_evaluator

    @property
    def objectives(self) -> tuple[ArrayFObjective, ...]:
        return self._objectives

    @property
    def constraints(self) -> tuple[Constraint[ArraySolution], ...]:
        return self._constraints

    def random_solution(self, rng: np.random.Generator, buffer: MemoryTypedBuffer | None = None) -> ArraySolution:
        """
        Uniform random point of the box with a NaN objective placeholder.

        With a buffer, the decision vector is cloned into buffer-owned storage;
        a pool of the wrong fixed length raises PoolMisuseError.
        """
        evaluator = self._array_evaluator
        lo = evaluator.min_x_value()
        hi = evaluator.max_x_value()
        x = rng.uniform(lo, hi, size=evaluator.x_len())
        if buffer is not None:
            x = buffer.clone(x)
        f = np.full(evaluator.objectives_len(), np.nan, dtype=float)
        return ArraySolution(x, f, evaluator.duplicate())


__all__ = ["ArrayOptimizerParams"]
