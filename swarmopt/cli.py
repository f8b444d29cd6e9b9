"""Command line entry point for the particle swarm optimisers."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass

from swarmopt.objectives import rastrigin, rosenbrock, weighted_quadratic
from swarmopt.scenarios import run_scenario, scenario_names
from swarmopt.swarm import Objective, ParticleSwarm, SwarmConfig


@dataclass(frozen=True)
class _Preset:
    objective: Objective
    lower: tuple[float, ...]
    upper: tuple[float, ...]
    population: int
    max_iterations: int
    runs: int


_PRESETS: dict[str, _Preset] = {
    "quadratic": _Preset(weighted_quadratic, (0, 0, 0), (10, 10, 10), 1000, 100000, 5),
    "rastrigin": _Preset(rastrigin, (0, 0), (10, 10), 100, 10000, 1),
    "rosenbrock": _Preset(rosenbrock, (0, 0), (10, 10), 100, 10000, 1),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swarmopt",
        description="Minimise a benchmark function with a particle swarm.",
    )
    parser.add_argument(
        "objective",
        nargs="?",
        default="quadratic",
        choices=sorted(_PRESETS),
        help="function to minimise (default: quadratic)",
    )
    parser.add_argument("--population", type=int, help="number of particles")
    parser.add_argument("--iterations", type=int, help="iterations per run")
    parser.add_argument("--runs", type=int, help="number of independent runs")
    parser.add_argument("--seed", type=int, help="seed of the random generator")
    parser.add_argument(
        "--scenario",
        choices=scenario_names(),
        help="run a distributed integer scenario instead",
    )
    return parser


def _run_continuous(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    preset = _PRESETS[args.objective]
    try:
        config = SwarmConfig(
            lower=preset.lower,
            upper=preset.upper,
            population=args.population if args.population is not None else preset.population,
            max_iterations=(
                args.iterations if args.iterations is not None else preset.max_iterations
            ),
            runs=args.runs if args.runs is not None else preset.runs,
        )
    except ValueError as error:
        parser.error(str(error))

    swarm = ParticleSwarm(preset.objective, config, random.Random(args.seed))
    last = None
    for run_number in range(1, config.runs + 1):
        print(f"Run = {run_number}")
        last = swarm.run_once()
        for _, position, _ in last.improvements:
            print(" ".join(f"{value:f}" for value in position))

    coordinates = ", ".join(f"{value:f}" for value in last.best_position)
    print()
    print(f"Best particle: {coordinates}.")
    print(f"Fitness: {last.best_fitness:f}")


def _run_distributed(name: str, seed: int | None) -> None:
    result = run_scenario(name, seed)
    print(f"Best function value: {result.fitness}")
    print("Best solution:")
    print(f"X1 = {result.position[0]}")
    print(f"X2 = {result.position[1]}")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the optimiser and print the best particle found."""
    parser = _parser()
    args = parser.parse_args(argv)
    started = time.process_time()
    if args.scenario is not None:
        _run_distributed(args.scenario, args.seed)
    else:
        _run_continuous(args, parser)
    print(f"Total execution time = {time.process_time() - started:f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())