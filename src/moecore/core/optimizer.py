"""
Optimizer boundary and the registry concrete strategies plug into.

No selection algorithm lives here. A strategy (NSGA-II, NSGA-III, ...) subclasses
``Optimizer`` and registers a factory::

    @register_optimizer("nsga2")
    class NSGA2(Optimizer[ArraySolution]):
        ...

    optimizer = make_optimizer("nsga2", meta=params)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

import numpy as np

from moecore.foundation.exceptions import OptimizerNotFoundError
from moecore.foundation.registry import Registry

from .contracts import Solution, SolutionsRuntimeProcessor
from .memory import MemoryTypedBuffer

S = TypeVar("S", bound=Solution)

OptimizerFactory = Callable[..., "Optimizer"]

OPTIMIZERS: Registry[OptimizerFactory] = Registry("optimizers")


class Optimizer(ABC, Generic[S]):
    """
    Owns the generation loop. ``optimize`` must stop when either its own rule
    fires or ``runtime_processor.needs_early_stop()`` returns True.
    """

    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def optimize(
        self,
        evaluator: Any,
        runtime_processor: SolutionsRuntimeProcessor[S],
        buffer: MemoryTypedBuffer,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def best_solutions(self) -> list[tuple[np.ndarray, S]]:
        """Final non-dominated set as ``(objective_vector, solution)`` pairs."""
        raise NotImplementedError


def register_optimizer(name: str, *, override: bool = False) -> Callable[[OptimizerFactory], OptimizerFactory]:
    return OPTIMIZERS.register(name, override=override)  # type: ignore[return-value]


def make_optimizer(name: str, **kwargs: Any) -> Optimizer:
    factory = OPTIMIZERS.get(name, None)
    if factory is None:
        raise OptimizerNotFoundError(name, OPTIMIZERS.names())
    return factory(**kwargs)


def available_optimizers() -> list[str]:
    return OPTIMIZERS.names()


__all__ = [
    "OPTIMIZERS",
    "Optimizer",
    "available_optimizers",
    "make_optimizer",
    "register_optimizer",
]
