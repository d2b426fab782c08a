from __future__ import annotations

import logging
from functools import partial
from typing import Sequence

import numpy as np

from moecore.core.contracts import SolutionsRuntimeProcessor
from moecore.core.memory import FixedSizeVectorsBuffer, MemoryTypedBuffer, SimpleNonbufferedAllocator
from moecore.foundation.exceptions import InvalidConfigurationError
from moecore.hooks.early_stop import EarlyStopPolicy

from .solution import ArraySolution

_logger = logging.getLogger(__name__)


class SolutionsRuntimeArrayProcessor(SolutionsRuntimeProcessor[ArraySolution]):
    """
    Runtime hooks for ArraySolution populations.

    Evaluates new candidates, tracks the generation index and forwards each
    generation to an optional early-stop policy. Without a policy it never
    asks for an early stop.

    With ``vector_size`` set, ``create_solutions_memory_buffer`` returns a
    pooled FixedSizeVectorsBuffer; otherwise a non-pooling allocator.
    """

    def __init__(
        self,
        *,
        early_stop: EarlyStopPolicy | None = None,
        vector_size: int | None = None,
        initial_pool_size: int = 0,
    ) -> None:
        self.current_iteration_num = 0
        self.early_stop = early_stop
        self.vector_size = vector_size
        self.initial_pool_size = int(initial_pool_size)
        self._evaluations = 0

    @property
    def evaluations(self) -> int:
        return self._evaluations

    def initialize_new_candidates(self, candidates: Sequence[ArraySolution]) -> None:
        for array_solution in candidates:
            array_solution.calculate_objectives()
        self._evaluations += len(candidates)

    def iterate_solutions(self, candidates: Sequence[ArraySolution]) -> None:
        if self.early_stop is not None:
            self.early_stop.observe(candidates)

    def iteration_num(self, num: int) -> None:
        if num < 0:
            raise InvalidConfigurationError(f"Iteration number must be >= 0, got {num}.", num=num)
        if num < self.current_iteration_num:
            raise InvalidConfigurationError(
                f"Iteration number went backwards: {self.current_iteration_num} -> {num}.",
                previous=self.current_iteration_num,
                num=num,
            )
        self.current_iteration_num = num
        _logger.debug("Generation %d (%d evaluations so far)", num, self._evaluations)

    def needs_early_stop(self) -> bool:
        if self.early_stop is None:
            return False
        stop = bool(self.early_stop.should_stop(self.current_iteration_num))
        if stop:
            _logger.info("Early stop at generation %d", self.current_iteration_num)
        return stop

    def create_solutions_memory_buffer(self) -> MemoryTypedBuffer:
        if self.vector_size is not None:
            return FixedSizeVectorsBuffer(self.vector_size, init_buffer_size=self.initial_pool_size)
        return SimpleNonbufferedAllocator(partial(np.zeros, 0, dtype=float))


__all__ = ["SolutionsRuntimeArrayProcessor"]
