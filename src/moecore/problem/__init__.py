from __future__ import annotations

from .catalog import EVALUATORS, LinearSumEvaluator, ZDT1Evaluator, ZDT2Evaluator, make_evaluator
from .evaluator import ArraySolutionEvaluator, FunctionEvaluator, check_declared_shape, validate_evaluator

__all__ = [
    "ArraySolutionEvaluator",
    "FunctionEvaluator",
    "check_declared_shape",
    "validate_evaluator",
    "EVALUATORS",
    "LinearSumEvaluator",
    "ZDT1Evaluator",
    "ZDT2Evaluator",
    "make_evaluator",
]
