from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from moecore.foundation.exceptions import InvalidConfigurationError, MissingConfigError
from moecore.foundation.ratio import Ratio
from moecore.hooks.early_stop import EarlyStopPolicy
from moecore.problem.evaluator import ArraySolutionEvaluator

from .params import ArrayOptimizerParams
from .processor import SolutionsRuntimeArrayProcessor


class _SerializableConfig:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


@dataclass(frozen=True)
class ArrayOptimizerConfigData(_SerializableConfig):
    population_size: int
    crossover: str
    mutation: str
    objective_targets: Optional[Tuple[Optional[float], ...]] = None
    pooled: bool = True
    initial_pool_size: int = 0

    def build_params(self, evaluator: ArraySolutionEvaluator, **kwargs: Any) -> ArrayOptimizerParams:
        return ArrayOptimizerParams(
            self.population_size,
            self.crossover,
            self.mutation,
            evaluator,
            objective_targets=self.objective_targets,
            **kwargs,
        )

    def build_processor(
        self,
        evaluator: ArraySolutionEvaluator,
        early_stop: EarlyStopPolicy | None = None,
    ) -> SolutionsRuntimeArrayProcessor:
        return SolutionsRuntimeArrayProcessor(
            early_stop=early_stop,
            vector_size=evaluator.x_len() if self.pooled else None,
            initial_pool_size=self.initial_pool_size if self.pooled else 0,
        )


def _rate_text(value: Ratio | str | float) -> str:
    # Keep "k/n" symbolic until the evaluator is known.
    if isinstance(value, str) and value.strip().lower().endswith("/n"):
        return value.strip().lower()
    return str(Ratio.parse(value))


class ArrayOptimizerConfig:
    """
    Declarative configuration holder for real-valued runs.

    Example::

        cfg = (
            ArrayOptimizerConfig()
            .population_size(100)
            .crossover("1/2")
            .mutation("3/10")
            .fixed()
        )
        params = cfg.build_params(ZDT1Evaluator(30))
    """

    def __init__(self):
        self._cfg: Dict[str, Any] = {}

    def population_size(self, value: int):
        if value <= 0:
            raise InvalidConfigurationError("population size must be positive.", population_size=value)
        self._cfg["population_size"] = int(value)
        return self

    def crossover(self, rate: Ratio | str | float):
        self._cfg["crossover"] = _rate_text(rate)
        return self

    def mutation(self, rate: Ratio | str | float):
        self._cfg["mutation"] = _rate_text(rate)
        return self

    def objective_targets(self, targets: Sequence[float | None]):
        self._cfg["objective_targets"] = tuple(None if t is None else float(t) for t in targets)
        return self

    def pooled(self, enabled: bool = True, *, initial_size: int = 0):
        """Use a FixedSizeVectorsBuffer for decision vectors (default)."""
        if initial_size < 0:
            raise InvalidConfigurationError("initial pool size must be >= 0.", initial_size=initial_size)
        self._cfg["pooled"] = bool(enabled)
        self._cfg["initial_pool_size"] = int(initial_size)
        return self

    def fixed(self) -> ArrayOptimizerConfigData:
        missing = [f for f in ("population_size", "crossover", "mutation") if f not in self._cfg]
        if missing:
            raise MissingConfigError(missing, "ArrayOptimizerConfig")
        return ArrayOptimizerConfigData(
            population_size=self._cfg["population_size"],
            crossover=self._cfg["crossover"],
            mutation=self._cfg["mutation"],
            objective_targets=self._cfg.get("objective_targets"),
            pooled=self._cfg.get("pooled", True),
            initial_pool_size=self._cfg.get("initial_pool_size", 0),
        )


__all__ = ["ArrayOptimizerConfig", "ArrayOptimizerConfigData"]
