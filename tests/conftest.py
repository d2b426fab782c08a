from __future__ import annotations

import numpy as np
import pytest

from moecore.problem import LinearSumEvaluator, ZDT1Evaluator


class ConstantCoin:
    """
    Stand-in random source whose integer draws are always ``value``.

    With ``value=0`` every ``Ratio(k, n)`` coin (k >= 1) fires; with a value at
    or above the numerator none does.
    """

    def __init__(self, value: int, uniform_value: float = 0.5) -> None:
        self.value = value
        self.uniform_value = uniform_value
        self.integer_calls = 0

    def integers(self, low, high=None, size=None):
        self.integer_calls += 1
        if size is None:
            return self.value
        return np.full(size, self.value, dtype=np.int64)

    def uniform(self, low=0.0, high=1.0, size=None):
        if size is None:
            return self.uniform_value
        return np.full(size, self.uniform_value, dtype=float)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def linear_evaluator():
    return LinearSumEvaluator(3)


@pytest.fixture
def zdt1_evaluator():
    return ZDT1Evaluator(8)


@pytest.fixture
def always_take_receiver():
    return ConstantCoin(0)


@pytest.fixture
def never_take_receiver():
    return ConstantCoin(1)


@pytest.fixture
def constant_coin():
    return ConstantCoin
