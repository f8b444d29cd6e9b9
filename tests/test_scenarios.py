import pytest

from swarmopt.distributed import Master
from swarmopt.objectives import integer_quadratic, integer_rosenbrock
from swarmopt.scenarios import Scenario, get_scenario, run_scenario, scenario_names


def test_names_cover_all_setups():
    names = scenario_names()
    assert set(names) == {
        "pso_8",
        "rosenbrock_1",
        "rosenbrock_2",
        "rosenbrock_3",
        "rosenbrock_4",
        "rosenbrock_5",
    }


def test_every_name_resolves():
    for name in scenario_names():
        assert get_scenario(name).name == name


def test_unknown_scenario_raises():
    with pytest.raises(KeyError):
        get_scenario("no_such_scenario")
    with pytest.raises(KeyError):
        run_scenario("no_such_scenario", seed=1)


def test_rosenbrock_4_parameters():
    scenario = get_scenario("rosenbrock_4")
    assert len(scenario.regions) == 4
    assert scenario.population == 50
    assert scenario.max_iterations == 100
    assert scenario.objective is integer_rosenbrock


def test_pso_8_fourth_region_uses_taller_bound():
    scenario = get_scenario("pso_8")
    assert scenario.objective is integer_quadratic
    assert scenario.regions[3].y_max == 100
    assert scenario.regions[2].y_max == 50


def test_rosenbrock_regions_stay_inside_box():
    for name in scenario_names():
        if not name.startswith("rosenbrock"):
            continue
        for region in get_scenario(name).regions:
            assert -65 <= region.x_min <= region.x_max <= 65
            assert -65 <= region.y_min <= region.y_max <= 65


def test_task_shares_are_equal_and_cover_population():
    scenario = get_scenario("rosenbrock_3")
    master = Master(
        scenario.objective,
        scenario.regions,
        scenario.population,
        max_iterations=scenario.max_iterations,
    )
    shares = {task.population for task in master.tasks()}
    assert len(shares) == 1
    assert shares.pop() * len(scenario.regions) <= scenario.population


def test_scenario_requires_regions():
    with pytest.raises(ValueError):
        Scenario(
            name="empty",
            objective=integer_rosenbrock,
            regions=(),
            population=10,
            max_iterations=5,
        )


def test_run_result_is_consistent():
    scenario = get_scenario("rosenbrock_4")
    result = run_scenario("rosenbrock_4", seed=7)
    assert result.fitness == integer_rosenbrock(result.position)
    assert any(result.position in region for region in scenario.regions)


def test_run_is_deterministic_for_a_seed():
    first = run_scenario("pso_8", seed=3)
    second = run_scenario("pso_8", seed=3)
    assert second.position == first.position
    assert second.fitness == first.fitness
    assert first.fitness == integer_quadratic(first.position)


def test_pso_8_result_lies_in_a_region():
    scenario = get_scenario("pso_8")
    result = run_scenario("pso_8", seed=11)
    assert result.fitness == integer_quadratic(result.position)
    assert any(result.position in region for region in scenario.regions)