"""Continuous particle swarm optimiser with a decreasing inertia schedule."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

Objective = Callable[[Sequence[float]], float]


def argmin(values: Sequence[float]) -> int:
    """Return the index of the first smallest value."""
    if not values:
        raise ValueError("argmin of an empty sequence")
    best = 0
    for index, value in enumerate(values):
        if value < values[best]:
            best = index
    return best


@dataclass(frozen=True)
class SwarmConfig:
    """Search box and parameters of a swarm."""

    lower: tuple[float, ...]
    upper: tuple[float, ...]
    population: int = 100
    max_iterations: int = 10000
    runs: int = 1
    inertia_min: float = 0.4
    inertia_max: float = 0.9
    cognitive: float = 2.0
    social: float = 2.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower", tuple(self.lower))
        object.__setattr__(self, "upper", tuple(self.upper))
        if not self.lower or len(self.lower) != len(self.upper):
            raise ValueError("lower and upper bounds must be non-empty and of equal length")
        if any(lo > hi for lo, hi in zip(self.lower, self.upper)):
            raise ValueError("each lower bound must not exceed its upper bound")
        if self.population < 1:
            raise ValueError("population must be at least 1")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.runs < 1:
            raise ValueError("runs must be at least 1")

    @property
    def dimension(self) -> int:
        return len(self.lower)

    def inertia(self, iteration: int) -> float:
        """Inertia weight for an iteration.

        The schedule divides iteration counts as integers, so the weight stays
        at its maximum until the last iteration, where it drops to the minimum.
        """
        fraction = iteration // self.max_iterations
        return self.inertia_max - (self.inertia_max - self.inertia_min) * fraction


@dataclass(frozen=True)
class SwarmResult:
    """Outcome of one run of the swarm."""

    best_position: tuple[float, ...]
    best_fitness: float
    iterations: int
    history: tuple[float, ...] = field(default=())
    improvements: tuple[tuple[int, tuple[float, ...], float], ...] = field(default=())


class ParticleSwarm:
    """Minimises an objective inside a box with a global-best particle swarm."""

    def __init__(
        self,
        objective: Objective,
        config: SwarmConfig,
        rng: random.Random | None = None,
    ) -> None:
        self.objective = objective
        self.config = config
        self._rng = rng if rng is not None else random.Random()

    def _clamp(self, position: list[float]) -> list[float]:
        clamped = []
        for x, lo, hi in zip(position, self.config.lower, self.config.upper):
            if x < lo:
                x = lo
            elif x > hi:
                x = hi
            clamped.append(x)
        return clamped

    def run_once(self) -> SwarmResult:
        """Run the swarm once from a fresh random population."""
        cfg = self.config
        rng = self._rng
        bounds = list(zip(cfg.lower, cfg.upper))

        positions = [
            [lo + rng.random() * (hi - lo) for lo, hi in bounds]
            for _ in range(cfg.population)
        ]
        velocities = [[0.1 * x for x in position] for position in positions]
        personal_fitness = [self.objective(position) for position in positions]
        personal_best = [list(position) for position in positions]

        best_index = argmin(personal_fitness)
        best_fitness = personal_fitness[best_index]
        global_best = list(positions[best_index])

        history: list[float] = []
        improvements: list[tuple[int, tuple[float, ...], float]] = []

        for iteration in range(1, cfg.max_iterations + 1):
            weight = cfg.inertia(iteration)
            velocities = [
                [
                    weight * v
                    + cfg.cognitive * rng.randrange(2) * (p - x)
                    + cfg.social * rng.randrange(2) * (g - x)
                    for v, x, p, g in zip(velocity, position, pbest, global_best)
                ]
                for velocity, position, pbest in zip(velocities, positions, personal_best)
            ]
            positions = [
                self._clamp([x + v for x, v in zip(position, velocity)])
                for position, velocity in zip(positions, velocities)
            ]

            for index, position in enumerate(positions):
                fitness = self.objective(position)
                if fitness < personal_fitness[index]:
                    personal_fitness[index] = fitness
                    personal_best[index] = list(position)

            current_index = argmin(personal_fitness)
            current_fitness = personal_fitness[current_index]
            history.append(current_fitness)

            if current_fitness < best_fitness:
                global_best = list(personal_best[current_index])
                best_fitness = current_fitness
                improvements.append((iteration, tuple(global_best), current_fitness))

        return SwarmResult(
            best_position=tuple(global_best),
            best_fitness=best_fitness,
            iterations=cfg.max_iterations,
            history=tuple(history),
            improvements=tuple(improvements),
        )

    def run(self) -> list[SwarmResult]:
        """Run the swarm the configured number of times, each from scratch."""
        return [self.run_once() for _ in range(self.config.runs)]