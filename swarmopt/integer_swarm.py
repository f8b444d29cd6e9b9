"""Integer particle swarm with bounded velocity increments."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from swarmopt.swarm import argmin

IntegerObjective = Callable[[Sequence[int]], int]


def truncated_remainder(dividend: int, divisor: int) -> int:
    """Return the remainder of a division that truncates toward zero.

    The result carries the sign of the dividend, so -13 and 10 give -3.
    """
    if divisor == 0:
        raise ZeroDivisionError("remainder by zero")
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


@dataclass(frozen=True)
class IntegerSwarmConfig:
    """Search box and parameters of an integer swarm.

    Positions are clamped to ``lower``/``upper``. The first population is drawn
    from ``initial_lower``/``initial_upper``, which default to the clamping box.
    The search stops after ``max_iterations`` iterations, or as soon as the best
    fitness equals ``stop_at_fitness``; at least one of the two must be given.
    """

    lower: tuple[int, ...]
    upper: tuple[int, ...]
    population: int = 100
    max_iterations: int | None = 20
    runs: int = 1
    inertia: int = 1
    acceleration: int = 2
    velocity_modulus: int = 10
    initial_velocity: int = 1
    stop_at_fitness: int | None = None
    initial_lower: tuple[int, ...] | None = None
    initial_upper: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        lower = tuple(int(value) for value in self.lower)
        upper = tuple(int(value) for value in self.upper)
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        if not lower or len(lower) != len(upper):
            raise ValueError("lower and upper bounds must be non-empty and of equal length")
        if any(lo > hi for lo, hi in zip(lower, upper)):
            raise ValueError("each lower bound must not exceed its upper bound")

        initial_lower = lower if self.initial_lower is None else tuple(
            int(value) for value in self.initial_lower
        )
        initial_upper = upper if self.initial_upper is None else tuple(
            int(value) for value in self.initial_upper
        )
        if len(initial_lower) != len(lower) or len(initial_upper) != len(lower):
            raise ValueError("initial bounds must have the dimension of the search box")
        if any(lo > hi for lo, hi in zip(initial_lower, initial_upper)):
            raise ValueError("each initial lower bound must not exceed its upper bound")
        object.__setattr__(self, "initial_lower", initial_lower)
        object.__setattr__(self, "initial_upper", initial_upper)

        if self.population < 1:
            raise ValueError("population must be at least 1")
        if self.runs < 1:
            raise ValueError("runs must be at least 1")
        if self.max_iterations is None and self.stop_at_fitness is None:
            raise ValueError("either max_iterations or stop_at_fitness must be given")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        if self.velocity_modulus == 0:
            raise ValueError("velocity_modulus must not be zero")

    @property
    def dimension(self) -> int:
        return len(self.lower)


@dataclass(frozen=True)
class IntegerSwarmResult:
    """Outcome of the last run of an integer swarm."""

    best_position: tuple[int, ...]
    best_fitness: int
    iterations: int
    history: tuple[int, ...] = field(default=())
    improvements: tuple[tuple[int, tuple[int, ...], int], ...] = field(default=())


class IntegerParticleSwarm:
    """Minimises an integer objective inside a box with a global-best swarm."""

    def __init__(
        self,
        objective: IntegerObjective,
        config: IntegerSwarmConfig,
        rng: random.Random | None = None,
    ) -> None:
        self.objective = objective
        self.config = config
        self._rng = rng if rng is not None else random.Random()

    def _clamp(self, position: list[int]) -> list[int]:
        return [
            lo if x < lo else hi if x > hi else x
            for x, lo, hi in zip(position, self.config.lower, self.config.upper)
        ]

    def _should_continue(self, iteration: int, best_fitness: int) -> bool:
        cfg = self.config
        if cfg.max_iterations is not None and iteration > cfg.max_iterations:
            return False
        return cfg.stop_at_fitness is None or best_fitness != cfg.stop_at_fitness

    def _run_once(self) -> IntegerSwarmResult:
        cfg = self.config
        rng = self._rng
        initial_box = list(zip(cfg.initial_lower, cfg.initial_upper))

        positions = [
            [rng.randint(lo, hi) for lo, hi in initial_box]
            for _ in range(cfg.population)
        ]
        velocities = [[cfg.initial_velocity] * cfg.dimension for _ in positions]
        personal_fitness = [self.objective(position) for position in positions]
        personal_best = [list(position) for position in positions]

        best_index = argmin(personal_fitness)
        best_fitness = personal_fitness[best_index]
        global_best = list(positions[best_index])

        history: list[int] = []
        improvements: list[tuple[int, tuple[int, ...], int]] = []

        iteration = 1
        while self._should_continue(iteration, best_fitness):
            velocities = [
                [
                    cfg.inertia * v
                    + truncated_remainder(
                        cfg.acceleration * rng.randrange(2) * (p - x)
                        + cfg.acceleration * rng.randrange(2) * (g - x),
                        cfg.velocity_modulus,
                    )
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

            iteration += 1

        return IntegerSwarmResult(
            best_position=tuple(global_best),
            best_fitness=best_fitness,
            iterations=iteration - 1,
            history=tuple(history),
            improvements=tuple(improvements),
        )

    def run(self) -> IntegerSwarmResult:
        """Run the swarm the configured number of times and report the last run."""
        result = self._run_once()
        for _ in range(self.config.runs - 1):
            result = self._run_once()
        return result