from .early_stop import (
    CompositeEarlyStop,
    EarlyStopPolicy,
    MaxIterations,
    NeverStop,
    ObjectivesGoodEnough,
    StopDecision,
)

__all__ = [
    "CompositeEarlyStop",
    "EarlyStopPolicy",
    "MaxIterations",
    "NeverStop",
    "ObjectivesGoodEnough",
    "StopDecision",
]
