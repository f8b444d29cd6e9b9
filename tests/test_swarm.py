import random

import pytest

from swarmopt.objectives import rastrigin, rosenbrock, weighted_quadratic
from swarmopt.swarm import ParticleSwarm, SwarmConfig, SwarmResult, argmin


def _small_config(**overrides):
    values = dict(lower=(0, 0), upper=(10, 10), population=20, max_iterations=50)
    values.update(overrides)
    return SwarmConfig(**values)


def test_argmin_first_of_ties():
    assert argmin([3.0, 1.0, 1.0, 2.0]) == 1


def test_argmin_single():
    assert argmin([5]) == 0


def test_argmin_empty():
    with pytest.raises(ValueError):
        argmin([])


@pytest.mark.parametrize(
    "overrides",
    [
        dict(lower=(0,), upper=(1, 1)),
        dict(lower=(), upper=()),
        dict(lower=(5, 0), upper=(1, 1)),
        dict(population=0),
        dict(max_iterations=0),
        dict(runs=0),
    ],
)
def test_config_validation(overrides):
    with pytest.raises(ValueError):
        _small_config(**overrides)


def test_inertia_schedule_source_values():
    cfg = _small_config(max_iterations=10)
    assert cfg.inertia(1) == pytest.approx(0.9)
    assert cfg.inertia(9) == pytest.approx(0.9)
    assert cfg.inertia(10) == pytest.approx(0.4)


def test_run_once_result_consistency():
    swarm = ParticleSwarm(rosenbrock, _small_config(), random.Random(7))
    result = swarm.run_once()
    assert result.iterations == 50
    assert len(result.history) == 50
    assert result.best_fitness == pytest.approx(rosenbrock(result.best_position))
    assert result.history[-1] == result.best_fitness


def test_history_non_increasing():
    swarm = ParticleSwarm(rastrigin, _small_config(), random.Random(3))
    history = swarm.run_once().history
    assert all(later <= earlier for earlier, later in zip(history, history[1:]))


def test_best_position_within_bounds():
    cfg = SwarmConfig(lower=(0, 0, 0), upper=(10, 10, 10), population=30, max_iterations=40)
    result = ParticleSwarm(weighted_quadratic, cfg, random.Random(11)).run_once()
    for x, lo, hi in zip(result.best_position, cfg.lower, cfg.upper):
        assert lo <= x <= hi


def test_improvements_strictly_decrease():
    result = ParticleSwarm(rosenbrock, _small_config(), random.Random(5)).run_once()
    fitnesses = [fitness for _, _, fitness in result.improvements]
    assert all(later < earlier for earlier, later in zip(fitnesses, fitnesses[1:]))
    if result.improvements:
        assert result.improvements[-1][1] == result.best_position
        assert result.improvements[-1][2] == result.best_fitness


def test_deterministic_with_seed():
    first = ParticleSwarm(rosenbrock, _small_config(), random.Random(42)).run_once()
    second = ParticleSwarm(rosenbrock, _small_config(), random.Random(42)).run_once()
    assert first == second


def test_degenerate_box_pins_position():
    cfg = SwarmConfig(lower=(1, 2, 3), upper=(1, 2, 3), population=5, max_iterations=5)
    result = ParticleSwarm(weighted_quadratic, cfg, random.Random(0)).run_once()
    assert result.best_position == (1, 2, 3)
    assert result.best_fitness == 0


def test_run_returns_one_result_per_run():
    cfg = _small_config(runs=3, max_iterations=10)
    results = ParticleSwarm(rosenbrock, cfg, random.Random(1)).run()
    assert len(results) == 3
    assert all(isinstance(r, SwarmResult) and r.iterations == 10 for r in results)


def test_swarm_improves_on_quadratic():
    cfg = SwarmConfig(lower=(0, 0, 0), upper=(10, 10, 10), population=60, max_iterations=200)
    result = ParticleSwarm(weighted_quadratic, cfg, random.Random(2024)).run_once()
    assert result.best_fitness <= result.history[0]
    assert result.best_fitness < 1.0