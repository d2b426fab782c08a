"""Shared building blocks: errors, logging, rational rates and registries."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidConfigurationError,
    MissingConfigError,
    MOECoreError,
    OptimizerNotFoundError,
    PoolMisuseError,
)
from .logging import configure_moecore_logging
from .ratio import Ratio
from .registry import Registry

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "InvalidConfigurationError",
    "MissingConfigError",
    "MOECoreError",
    "OptimizerNotFoundError",
    "PoolMisuseError",
    "configure_moecore_logging",
    "Ratio",
    "Registry",
]
