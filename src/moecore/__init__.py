from .array import (
    ArrayFObjective,
    ArrayFunctionConstraint,
    ArrayOptimizerConfig,
    ArrayOptimizerConfigData,
    ArrayOptimizerParams,
    ArraySolution,
    SolutionsRuntimeArrayProcessor,
)
from .core import (
    Constraint,
    FixedSizeVectorsBuffer,
    MemoryTypedBuffer,
    Meta,
    Objective,
    Optimizer,
    SimpleNonbufferedAllocator,
    Solution,
    SolutionsRuntimeProcessor,
    available_optimizers,
    make_optimizer,
    register_optimizer,
)
from .foundation import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidConfigurationError,
    MOECoreError,
    PoolMisuseError,
    Ratio,
    configure_moecore_logging,
)
from .hooks import CompositeEarlyStop, MaxIterations, NeverStop, ObjectivesGoodEnough
from .problem import (
    ArraySolutionEvaluator,
    FunctionEvaluator,
    LinearSumEvaluator,
    ZDT1Evaluator,
    ZDT2Evaluator,
    make_evaluator,
    validate_evaluator,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayFObjective",
    "ArrayFunctionConstraint",
    "ArrayOptimizerConfig",
    "ArrayOptimizerConfigData",
    "ArrayOptimizerParams",
    "ArraySolution",
    "SolutionsRuntimeArrayProcessor",
    "Constraint",
    "FixedSizeVectorsBuffer",
    "MemoryTypedBuffer",
    "Meta",
    "Objective",
    "Optimizer",
    "SimpleNonbufferedAllocator",
    "Solution",
    "SolutionsRuntimeProcessor",
    "available_optimizers",
    "make_optimizer",
    "register_optimizer",
    "ConfigurationError",
    "DimensionMismatchError",
    "InvalidConfigurationError",
    "MOECoreError",
    "PoolMisuseError",
    "Ratio",
    "configure_moecore_logging",
    "CompositeEarlyStop",
    "MaxIterations",
    "NeverStop",
    "ObjectivesGoodEnough",
    "ArraySolutionEvaluator",
    "FunctionEvaluator",
    "LinearSumEvaluator",
    "ZDT1Evaluator",
    "ZDT2Evaluator",
    "make_evaluator",
    "validate_evaluator",
]
