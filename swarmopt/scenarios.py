"""Named distributed search set-ups: regions, population and iteration budgets."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from swarmopt.distributed import (
    DEFAULT_WORKER_ITERATIONS,
    DEFAULT_WORKER_RUNS,
    Master,
    Region,
    ResultMessage,
)
from swarmopt.objectives import integer_quadratic, integer_rosenbrock


@dataclass(frozen=True)
class Scenario:
    """A master set-up: objective, worker regions and search parameters.

    ``population`` is the total that the master divides equally between regions.
    """

    name: str
    objective: Callable[[Sequence[int]], int]
    regions: tuple[Region, ...]
    population: int
    max_iterations: int
    runs: int = 1
    inertia: int = 1
    acceleration: int = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "regions", tuple(self.regions))
        if not self.regions:
            raise ValueError("a scenario needs at least one region")


_SCENARIOS: dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in (
        Scenario(
            name="pso_8",
            objective=integer_quadratic,
            regions=(
                Region(0, 25, 0, 50),
                Region(25, 50, 0, 50),
                Region(50, 75, 0, 50),
                # The fourth worker is sent the upper y bound of the fifth region.
                Region(75, 100, 0, 100),
                Region(0, 25, 50, 100),
                Region(25, 50, 50, 100),
                Region(50, 75, 50, 100),
                Region(75, 100, 50, 100),
            ),
            population=8 * 100,
            max_iterations=DEFAULT_WORKER_ITERATIONS,
            runs=DEFAULT_WORKER_RUNS,
        ),
        Scenario(
            name="rosenbrock_1",
            objective=integer_rosenbrock,
            regions=(Region(-65, 65, -65, 65),),
            population=250,
            max_iterations=400,
        ),
        Scenario(
            name="rosenbrock_2",
            objective=integer_rosenbrock,
            regions=(Region(-65, -1, -65, 65), Region(0, 65, -65, 65)),
            population=250,
            max_iterations=400,
        ),
        Scenario(
            name="rosenbrock_3",
            objective=integer_rosenbrock,
            regions=(
                Region(-65, -1, -65, 22),
                Region(0, 65, -65, 22),
                Region(-65, 65, 23, 65),
            ),
            population=250,
            max_iterations=400,
        ),
        Scenario(
            name="rosenbrock_4",
            objective=integer_rosenbrock,
            regions=(
                Region(-65, -1, -65, -1),
                Region(-65, -1, 0, 65),
                Region(0, 65, -65, -1),
                Region(0, 65, 0, 65),
            ),
            population=50,
            max_iterations=100,
        ),
        Scenario(
            name="rosenbrock_5",
            objective=integer_rosenbrock,
            regions=(
                Region(-65, -39, -65, -1),
                Region(-65, -39, 0, 65),
                Region(-38, -13, -65, -1),
                Region(-38, -13, 0, 65),
                Region(-12, 65, -65, 65),
            ),
            population=250,
            max_iterations=400,
        ),
    )
}


def scenario_names() -> tuple[str, ...]:
    """Names of the known scenarios, in definition order."""
    return tuple(_SCENARIOS)


def get_scenario(name: str) -> Scenario:
    """Return the scenario of that name; raise KeyError if there is none."""
    try:
        return _SCENARIOS[name]
    except KeyError:
        known = ", ".join(_SCENARIOS)
        raise KeyError(f"unknown scenario {name!r}; known: {known}") from None


def _master_for(scenario: Scenario) -> Master:
    return Master(
        scenario.objective,
        scenario.regions,
        scenario.population,
        inertia=scenario.inertia,
        acceleration=scenario.acceleration,
        max_iterations=scenario.max_iterations,
        runs=scenario.runs,
    )


def run_scenario(name: str, seed: int | None = None) -> ResultMessage:
    """Run the named scenario and return the best result over all regions."""
    scenario = get_scenario(name)
    return _master_for(scenario).run(random.Random(seed))