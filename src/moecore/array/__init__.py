"""Continuous decision-vector encoding: solution, objectives, parameters and runtime hooks."""

from __future__ import annotations

from .config import ArrayOptimizerConfig, ArrayOptimizerConfigData
from .objectives import ArrayFObjective, ArrayFunctionConstraint
from .params import ArrayOptimizerParams
from .processor import SolutionsRuntimeArrayProcessor
from .solution import ArraySolution

__all__ = [
    "ArrayOptimizerConfig",
    "ArrayOptimizerConfigData",
    "ArrayFObjective",
    "ArrayFunctionConstraint",
    "ArrayOptimizerParams",
    "SolutionsRuntimeArrayProcessor",
    "ArraySolution",
]
