import json

import pytest

from moecore.array import ArrayOptimizerConfig, ArrayOptimizerConfigData, SolutionsRuntimeArrayProcessor
from moecore.core.memory import FixedSizeVectorsBuffer, SimpleNonbufferedAllocator
from moecore.foundation.exceptions import ConfigurationError, InvalidConfigurationError
from moecore.foundation.ratio import Ratio
from moecore.hooks import MaxIterations
from moecore.problem import ZDT1Evaluator


def _base():
    return ArrayOptimizerConfig().population_size(20).crossover(0.9).mutation("1/n")


def test_fixed_config_round_trips_to_dict():
    cfg = _base().objective_targets([0.1, None]).fixed()
    assert isinstance(cfg, ArrayOptimizerConfigData)
    data = cfg.to_dict()
    assert data["population_size"] == 20
    assert data["crossover"] == "9/10"
    assert data["mutation"] == "1/n"
    assert data["pooled"] is True
    assert json.loads(cfg.to_json())["objective_targets"] == [0.1, None]


def test_missing_fields_reported():
    with pytest.raises(ConfigurationError, match="'crossover'"):
        ArrayOptimizerConfig().population_size(10).mutation("1/n").fixed()


def test_invalid_values_rejected_early():
    with pytest.raises(InvalidConfigurationError):
        ArrayOptimizerConfig().population_size(0)
    with pytest.raises(InvalidConfigurationError):
        ArrayOptimizerConfig().crossover(1.5)
    with pytest.raises(InvalidConfigurationError):
        ArrayOptimizerConfig().pooled(True, initial_size=-1)


def test_build_params_and_processor():
    evaluator = ZDT1Evaluator(6)
    cfg = _base().pooled(True, initial_size=8).fixed()
    params = cfg.build_params(evaluator)
    assert params.population_size == 20
    assert params.crossover_odds == Ratio(9, 10)
    assert params.mutation_odds == Ratio(1, 6)
    proc = cfg.build_processor(evaluator, early_stop=MaxIterations(5))
    assert isinstance(proc, SolutionsRuntimeArrayProcessor)
    buffer = proc.create_solutions_memory_buffer()
    assert isinstance(buffer, FixedSizeVectorsBuffer)
    assert buffer.fixed_vector_size == 6
    assert buffer.free_count == 8


def test_unpooled_processor():
    cfg = _base().pooled(False).fixed()
    proc = cfg.build_processor(ZDT1Evaluator(6))
    assert isinstance(proc.create_solutions_memory_buffer(), SimpleNonbufferedAllocator)


def test_config_data_is_frozen():
    cfg = _base().fixed()
    with pytest.raises(AttributeError):
        cfg.population_size = 3
