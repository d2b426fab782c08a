"""
Drives the runtime-processor protocol end to end with a deliberately naive
optimizer: offspring replace their parents unconditionally and the "best"
set is the non-dominated subset of the last population.
"""

from __future__ import annotations

import numpy as np
import pytest

from moecore.array import ArrayOptimizerConfig, ArrayOptimizerParams, ArraySolution
from moecore.core.memory import FixedSizeVectorsBuffer
from moecore.core.optimizer import OPTIMIZERS, Optimizer, make_optimizer, register_optimizer
from moecore.hooks import MaxIterations, ObjectivesGoodEnough
from moecore.problem import LinearSumEvaluator, ZDT1Evaluator


class _Recorder:
    def __init__(self, inner):
        self.inner = inner
        self.calls: list[str] = []

    def initialize_new_candidates(self, candidates):
        self.calls.append("init")
        assert all(not c.evaluated for c in candidates)
        self.inner.initialize_new_candidates(candidates)

    def iterate_solutions(self, candidates):
        self.calls.append("iter")
        self.inner.iterate_solutions(candidates)

    def iteration_num(self, num):
        self.calls.append(f"num:{num}")
        self.inner.iteration_num(num)

    def needs_early_stop(self):
        self.calls.append("stop?")
        return self.inner.needs_early_stop()

    def create_solutions_memory_buffer(self):
        return self.inner.create_solutions_memory_buffer()


def _non_dominated(population):
    F = np.array([s.f for s in population])
    keep = []
    for i, fi in enumerate(F):
        dominated = np.any(np.all(F <= fi, axis=1) & np.any(F < fi, axis=1))
        if not dominated:
            keep.append(i)
    return [population[i] for i in keep]


class NaiveGenerational(Optimizer[ArraySolution]):
    def __init__(self, meta: ArrayOptimizerParams, generations: int, seed: int = 0) -> None:
        self.meta = meta
        self.generations = generations
        self.rng = np.random.default_rng(seed)
        self.population: list[ArraySolution] = []
        self.generations_run = 0

    def name(self) -> str:
        return "naive-generational"

    def optimize(self, evaluator, runtime_processor, buffer) -> None:
        self.population = [self.meta.random_solution(self.rng, buffer) for _ in range(self.meta.population_size)]
        runtime_processor.initialize_new_candidates(self.population)
        for gen in range(self.generations):
            offspring = [s.copy(buffer) for s in self.population]
            for a, b in zip(offspring[::2], offspring[1::2]):
                if self.meta.crossover_odds.sample(self.rng):
                    a.crossover(buffer, b, self.rng)
            for child in offspring:
                if self.meta.mutation_odds.sample(self.rng):
                    child.mutate(buffer, self.rng)
            runtime_processor.initialize_new_candidates([c for c in offspring if not c.evaluated])
            for old in self.population:
                old.release(buffer)
            self.population = offspring
            runtime_processor.iterate_solutions(self.population)
            runtime_processor.iteration_num(gen)
            self.generations_run = gen + 1
            if runtime_processor.needs_early_stop():
                break

    def best_solutions(self):
        return [(s.f.copy(), s) for s in _non_dominated(self.population)]


@pytest.fixture
def naive_registered():
    register_optimizer("naive-generational")(NaiveGenerational)
    yield
    OPTIMIZERS.unregister("naive-generational")


def test_protocol_order_and_invariants(naive_registered):
    evaluator = ZDT1Evaluator(6)
    cfg = ArrayOptimizerConfig().population_size(10).crossover("9/10").mutation("1/1").fixed()
    params = cfg.build_params(evaluator)
    inner = cfg.build_processor(evaluator)
    processor = _Recorder(inner)
    buffer = processor.create_solutions_memory_buffer()
    assert isinstance(buffer, FixedSizeVectorsBuffer)

    optimizer = make_optimizer("naive-generational", meta=params, generations=4, seed=1)
    optimizer.optimize(evaluator, processor, buffer)

    assert optimizer.generations_run == 4
    assert processor.calls[0] == "init"
    assert processor.calls[1:5] == ["init", "iter", "num:0", "stop?"]
    assert processor.calls[-3:] == ["iter", "num:3", "stop?"]
    assert inner.current_iteration_num == 3

    for sol in optimizer.population:
        assert sol.evaluated
        assert sol.x.shape == (evaluator.x_len(),)
        assert sol.f.shape == (evaluator.objectives_len(),)
        assert np.all(sol.x >= 0.0) and np.all(sol.x <= 1.0)

    # Every live decision vector is owned by exactly one solution.
    assert buffer.outstanding_count == params.population_size
    assert len({id(s.x) for s in optimizer.population}) == params.population_size
    # Storage released by the previous generation is recycled.
    assert buffer.allocated_total <= 2 * params.population_size + 2

    best = optimizer.best_solutions()
    assert best
    for f, sol in best:
        np.testing.assert_array_equal(f, sol.f)


def test_early_stop_ends_run_at_generation_boundary():
    evaluator = LinearSumEvaluator(3)
    params = ArrayOptimizerParams(6, "1/2", "1/n", evaluator)
    processor = ArrayOptimizerConfig().population_size(6).crossover("1/2").mutation("1/n").fixed().build_processor(
        evaluator, early_stop=MaxIterations(2)
    )
    optimizer = NaiveGenerational(params, generations=50)
    optimizer.optimize(evaluator, processor, processor.create_solutions_memory_buffer())
    assert optimizer.generations_run == 2
    assert processor.current_iteration_num == 1


def test_good_enough_targets_stop_immediately():
    evaluator = LinearSumEvaluator(3)
    params = ArrayOptimizerParams(4, "1/2", "1/n", evaluator, objective_targets=[3.0, 3.0])
    from moecore.array import SolutionsRuntimeArrayProcessor

    processor = SolutionsRuntimeArrayProcessor(early_stop=ObjectivesGoodEnough(params.objectives))
    optimizer = NaiveGenerational(params, generations=10)
    optimizer.optimize(evaluator, processor, processor.create_solutions_memory_buffer())
    assert optimizer.generations_run == 1


def test_linear_sum_front_is_whole_population():
    evaluator = LinearSumEvaluator(3)
    params = ArrayOptimizerParams(8, "1/2", "1/n", evaluator)
    processor = ArrayOptimizerConfig().population_size(8).crossover("1/2").mutation("1/n").pooled(False).fixed().build_processor(evaluator)
    optimizer = NaiveGenerational(params, generations=3, seed=9)
    optimizer.optimize(evaluator, processor, processor.create_solutions_memory_buffer())
    # f0 + f1 is constant, so no solution dominates another unless identical.
    assert len(optimizer.best_solutions()) == len(optimizer.population)
