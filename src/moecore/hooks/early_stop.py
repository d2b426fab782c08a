from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from moecore.core.contracts import Objective
from moecore.foundation.exceptions import InvalidConfigurationError

_logger = logging.getLogger(__name__)


@dataclass
class StopDecision:
    stop: bool
    reason: str
    iteration: int


@runtime_checkable
class EarlyStopPolicy(Protocol):
    """
    Early-stop interface consulted by the runtime processor.

    ``observe`` sees each generation's population (before the generation index
    is recorded); ``should_stop`` answers at the generation boundary with the
    recorded index.
    """

    def observe(self, candidates: Sequence[Any]) -> None: ...

    def should_stop(self, iteration: int) -> bool: ...


class NeverStop:
    """Default policy: the optimizer's own stopping rule decides."""

    def observe(self, candidates: Sequence[Any]) -> None:
        return None

    def should_stop(self, iteration: int) -> bool:
        return False


class MaxIterations:
    """Stop after ``limit`` generations (indices ``0 .. limit-1``)."""

    def __init__(self, limit: int) -> None:
        if limit <= 0:
            raise InvalidConfigurationError(f"limit must be > 0, got {limit}.", limit=limit)
        self.limit = int(limit)
        self.decision: StopDecision | None = None

    def observe(self, candidates: Sequence[Any]) -> None:
        return None

    def should_stop(self, iteration: int) -> bool:
        if iteration + 1 >= self.limit:
            self.decision = StopDecision(True, "max_iterations", iteration)
            return True
        return False


class ObjectivesGoodEnough:
    """
    Stop once an evaluated candidate was good enough on every objective.
    Candidates that still need evaluation are skipped.
    """

    def __init__(self, objectives: Sequence[Objective]) -> None:
        if not objectives:
            raise InvalidConfigurationError("ObjectivesGoodEnough needs at least one objective.")
        self.objectives = tuple(objectives)
        self.decision: StopDecision | None = None
        self._satisfied = False

    def observe(self, candidates: Sequence[Any]) -> None:
        if self._satisfied:
            return
        for candidate in candidates:
            if not getattr(candidate, "evaluated", True):
                continue
            if all(obj.good_enough(obj.value(candidate)) for obj in self.objectives):
                self._satisfied = True
                return

    def should_stop(self, iteration: int) -> bool:
        if self._satisfied and self.decision is None:
            self.decision = StopDecision(True, "objectives_good_enough", iteration)
        return self._satisfied


class CompositeEarlyStop:
    """Fan-out observations to several policies; stop when any of them does."""

    def __init__(self, policies: Sequence[EarlyStopPolicy | None]) -> None:
        self._policies = [p for p in policies if p is not None]

    def observe(self, candidates: Sequence[Any]) -> None:
        for policy in self._policies:
            policy.observe(candidates)

    def should_stop(self, iteration: int) -> bool:
        for policy in self._policies:
            if policy.should_stop(iteration):
                _logger.debug("Early stop requested by %s", type(policy).__name__)
                return True
        return False


__all__ = [
    "CompositeEarlyStop",
    "EarlyStopPolicy",
    "MaxIterations",
    "NeverStop",
    "ObjectivesGoodEnough",
    "StopDecision",
]
