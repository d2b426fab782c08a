from __future__ import annotations

from .contracts import Constraint, Meta, Objective, Solution, SolutionsRuntimeProcessor
from .memory import FixedSizeVectorsBuffer, MemoryTypedBuffer, SimpleNonbufferedAllocator
from .optimizer import OPTIMIZERS, Optimizer, available_optimizers, make_optimizer, register_optimizer

__all__ = [
    "Constraint",
    "Meta",
    "Objective",
    "Solution",
    "SolutionsRuntimeProcessor",
    "FixedSizeVectorsBuffer",
    "MemoryTypedBuffer",
    "SimpleNonbufferedAllocator",
    "OPTIMIZERS",
    "Optimizer",
    "available_optimizers",
    "make_optimizer",
    "register_optimizer",
]
