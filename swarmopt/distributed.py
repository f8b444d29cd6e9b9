"""Master/worker split of an integer swarm search over rectangular regions."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from swarmopt.integer_swarm import (
    IntegerObjective,
    IntegerParticleSwarm,
    IntegerSwarmConfig,
)

TASK_WORDS = 10
LEGACY_TASK_WORDS = 8
RESULT_WORDS = 3
DEFAULT_WORKER_ITERATIONS = 20
DEFAULT_WORKER_RUNS = 1


def _padded(words: list[int], size: int | None) -> list[int]:
    if size is None:
        return words
    if size < len(words):
        raise ValueError(f"message needs {len(words)} words, size {size} is too small")
    return words + [0] * (size - len(words))


@dataclass(frozen=True)
class Region:
    """A rectangle of the plane that one worker searches."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def __post_init__(self) -> None:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError("region minimum must not exceed its maximum")

    @property
    def lower(self) -> tuple[int, int]:
        return (self.x_min, self.y_min)

    @property
    def upper(self) -> tuple[int, int]:
        return (self.x_max, self.y_max)

    def __contains__(self, position: object) -> bool:
        x, y = position  # type: ignore[misc]
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


@dataclass(frozen=True)
class TaskMessage:
    """Parameters the master hands to one worker."""

    dimension: int
    population: int
    region: Region
    inertia: int
    acceleration: int
    max_iterations: int = DEFAULT_WORKER_ITERATIONS
    runs: int = DEFAULT_WORKER_RUNS

    def to_words(self, size: int | None = None) -> list[int]:
        """Encode as a list of integer words, zero-padded to ``size``."""
        words = [
            self.dimension,
            self.population,
            self.region.x_min,
            self.region.x_max,
            self.region.y_min,
            self.region.y_max,
            self.inertia,
            self.acceleration,
            self.max_iterations,
            self.runs,
        ]
        return _padded(words, size)

    @classmethod
    def from_words(cls, words: Sequence[int]) -> TaskMessage:
        """Decode a task; an eight-word message leaves iterations and runs at their defaults."""
        if len(words) < LEGACY_TASK_WORDS:
            raise ValueError(
                f"a task message needs at least {LEGACY_TASK_WORDS} words, got {len(words)}"
            )
        dimension, population, x_min, x_max, y_min, y_max, inertia, acceleration = (
            int(word) for word in words[:LEGACY_TASK_WORDS]
        )
        if len(words) >= TASK_WORDS:
            max_iterations, runs = int(words[8]), int(words[9])
        else:
            max_iterations, runs = DEFAULT_WORKER_ITERATIONS, DEFAULT_WORKER_RUNS
        return cls(
            dimension=dimension,
            population=population,
            region=Region(x_min, x_max, y_min, y_max),
            inertia=inertia,
            acceleration=acceleration,
            max_iterations=max_iterations,
            runs=runs,
        )


@dataclass(frozen=True)
class ResultMessage:
    """Best fitness and position a worker reports back."""

    fitness: int
    position: tuple[int, int]

    def __post_init__(self) -> None:
        position = tuple(int(value) for value in self.position)
        if len(position) != 2:
            raise ValueError("a result position has two coordinates")
        object.__setattr__(self, "position", position)

    def to_words(self, size: int | None = None) -> list[int]:
        """Encode as ``[fitness, x, y]``, zero-padded to ``size``."""
        return _padded([self.fitness, *self.position], size)

    @classmethod
    def from_words(cls, words: Sequence[int]) -> ResultMessage:
        """Decode a result from its first three words."""
        if len(words) < RESULT_WORDS:
            raise ValueError(
                f"a result message needs at least {RESULT_WORDS} words, got {len(words)}"
            )
        return cls(fitness=int(words[0]), position=(int(words[1]), int(words[2])))


def run_worker(
    task: TaskMessage,
    objective: IntegerObjective,
    rng: random.Random | None = None,
) -> ResultMessage:
    """Search the task's region with an integer swarm and report the best found."""
    if task.dimension != 2:
        raise ValueError("workers search two-dimensional regions only")
    config = IntegerSwarmConfig(
        lower=task.region.lower,
        upper=task.region.upper,
        population=task.population,
        max_iterations=task.max_iterations,
        runs=task.runs,
        inertia=task.inertia,
        acceleration=task.acceleration,
    )
    result = IntegerParticleSwarm(objective, config, rng).run()
    return ResultMessage(fitness=result.best_fitness, position=result.best_position)


class Master:
    """Splits a population across regions and keeps the best worker result."""

    def __init__(
        self,
        objective: IntegerObjective,
        regions: Iterable[Region],
        population: int,
        inertia: int = 1,
        acceleration: int = 2,
        max_iterations: int = 400,
        runs: int = 1,
    ) -> None:
        self.objective = objective
        self.regions = tuple(regions)
        if not self.regions:
            raise ValueError("at least one region is needed")
        if population // len(self.regions) < 1:
            raise ValueError("population is too small for the number of regions")
        self.population = population
        self.inertia = inertia
        self.acceleration = acceleration
        self.max_iterations = max_iterations
        self.runs = runs

    def tasks(self) -> list[TaskMessage]:
        """One task per region, each with an equal integer share of the population."""
        share = self.population // len(self.regions)
        return [
            TaskMessage(
                dimension=2,
                population=share,
                region=region,
                inertia=self.inertia,
                acceleration=self.acceleration,
                max_iterations=self.max_iterations,
                runs=self.runs,
            )
            for region in self.regions
        ]

    @staticmethod
    def combine(results: Iterable[ResultMessage]) -> ResultMessage:
        """Return the result with the lowest fitness; earlier results win ties."""
        best: ResultMessage | None = None
        for result in results:
            if best is None or result.fitness < best.fitness:
                best = result
        if best is None:
            raise ValueError("no results to combine")
        return best

    def run(self, rng: random.Random | None = None) -> ResultMessage:
        """Run every task in turn and combine their results."""
        rng = rng if rng is not None else random.Random()
        return self.combine(run_worker(task, self.objective, rng) for task in self.tasks())