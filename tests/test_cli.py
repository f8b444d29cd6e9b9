import pytest

from swarmopt.cli import main
from swarmopt.objectives import integer_rosenbrock


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def _without_time(lines):
    return [line for line in lines if not line.startswith("Total execution time")]


def _best_particle(lines):
    line = next(line for line in lines if line.startswith("Best particle:"))
    return [float(part) for part in line.removeprefix("Best particle:").strip(" .").split(",")]


def _fitness(lines):
    line = next(line for line in lines if line.startswith("Fitness:"))
    return float(line.removeprefix("Fitness:"))


def test_quadratic_run_reports_each_run(capsys):
    code = main(["quadratic", "--population", "20", "--iterations", "15", "--runs", "2", "--seed", "1"])
    lines = _lines(capsys)
    assert code == 0
    assert [line for line in lines if line.startswith("Run =")] == ["Run = 1", "Run = 2"]
    particle = _best_particle(lines)
    assert len(particle) == 3
    assert all(0 <= value <= 10 for value in particle)
    assert _fitness(lines) >= 0


def test_rosenbrock_best_particle_in_box(capsys):
    main(["rosenbrock", "--population", "15", "--iterations", "20", "--seed", "4"])
    lines = _lines(capsys)
    particle = _best_particle(lines)
    assert len(particle) == 2
    assert all(0 <= value <= 10 for value in particle)
    assert any(line.startswith("Total execution time") for line in lines)


def test_rastrigin_fitness_at_least_lower_bound(capsys):
    main(["rastrigin", "--population", "10", "--iterations", "10", "--seed", "2"])
    lines = _lines(capsys)
    # Each coordinate contributes at least -1, so 2 coordinates give at least 20 - 2.
    assert _fitness(lines) >= 18


def test_same_seed_gives_same_output(capsys):
    args = ["quadratic", "--population", "10", "--iterations", "10", "--runs", "1", "--seed", "9"]
    main(args)
    first = _without_time(_lines(capsys))
    main(args)
    second = _without_time(_lines(capsys))
    assert first == second


def test_invalid_objective_exits():
    with pytest.raises(SystemExit) as info:
        main(["sphere"])
    assert info.value.code == 2


def test_invalid_population_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["rosenbrock", "--population", "0"])
    assert info.value.code == 2
    assert "population" in capsys.readouterr().err


def test_scenario_output_is_consistent(capsys):
    assert main(["--scenario", "rosenbrock_4", "--seed", "5"]) == 0
    lines = _lines(capsys)
    fitness = int(next(l for l in lines if l.startswith("Best function value:")).split(":")[1])
    x1 = int(next(l for l in lines if l.startswith("X1 =")).split("=")[1])
    x2 = int(next(l for l in lines if l.startswith("X2 =")).split("=")[1])
    assert fitness == integer_rosenbrock((x1, x2))
    assert -65 <= x1 <= 65 and -65 <= x2 <= 65


def test_unknown_scenario_exits():
    with pytest.raises(SystemExit) as info:
        main(["--scenario", "missing"])
    assert info.value.code == 2