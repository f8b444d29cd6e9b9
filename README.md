# swarmopt

Particle swarm optimisation in plain Python, using only the standard library.

## What is in the package

- `swarmopt.objectives`: functions to minimise.
  - `weighted_quadratic(position)`: `10(x-1)^2 + 20(y-2)^2 + 30(z-3)^2` on three
    coordinates, minimum 0 at `(1, 2, 3)`.
  - `rastrigin(position)`: `10*n + sum(x^2 - cos(2*RASTRIGIN_PI*x))`, where
    `RASTRIGIN_PI` is `3.415`, not pi.
  - `rosenbrock(position)`: `(1-x)^2 + 100(y-x^2)^2`, minimum 0 at `(1, 1)`.
  - `integer_quadratic(position)`: `10(x-10)^2 + 20(y-20)^2` on integers.
  - `integer_rosenbrock(position)`: the Rosenbrock function on integers.

  Each raises `ValueError` when given the wrong number of coordinates.

- `swarmopt.swarm`: a continuous global-best swarm.
  - `SwarmConfig(lower, upper, population=100, max_iterations=10000, runs=1,
    inertia_min=0.4, inertia_max=0.9, cognitive=2.0, social=2.0)`.
    The inertia weight stays at `inertia_max` until the last iteration, where it
    drops to `inertia_min`.
  - `ParticleSwarm(objective, config, rng=None)`; `run_once()` returns one
    `SwarmResult`, `run()` returns a list of `config.runs` results.
  - `SwarmResult` holds `best_position`, `best_fitness`, `iterations`,
    `history` (best fitness after each iteration) and `improvements`
    (`(iteration, position, fitness)` each time the global best improved).
  - `argmin(values)`: index of the first smallest value.

- `swarmopt.integer_swarm`: a swarm on whole-number positions and velocities.
  - `IntegerSwarmConfig(lower, upper, population=100, max_iterations=20, runs=1,
    inertia=1, acceleration=2, velocity_modulus=10, initial_velocity=1,
    stop_at_fitness=None, initial_lower=None, initial_upper=None)`. The search
    stops after `max_iterations` iterations or once the best fitness equals
    `stop_at_fitness`.
  - `IntegerParticleSwarm(objective, config, rng=None).run()` performs
    `config.runs` runs and returns the `IntegerSwarmResult` of the last one.
  - `truncated_remainder(dividend, divisor)`: remainder with the sign of the
    dividend, used to bound each velocity increment.

- `swarmopt.distributed`: a master/worker split over rectangular regions.
  - `Region(x_min, x_max, y_min, y_max)`.
  - `TaskMessage` and `ResultMessage`, which encode to and decode from lists of
    integer words with `to_words(size=None)` and `from_words(words)`.
  - `run_worker(task, objective, rng=None)`: runs an integer swarm over the
    task's region and returns a `ResultMessage`.
  - `Master(objective, regions, population, inertia=1, acceleration=2,
    max_iterations=400, runs=1)`: `tasks()` gives every region an equal integer
    share of the population, `combine(results)` keeps the lowest fitness
    (earlier results win ties), `run(rng=None)` does both.

- `swarmopt.scenarios`: ready-made set-ups `pso_8` and `rosenbrock_1` to
  `rosenbrock_5`. `scenario_names()` lists them, `get_scenario(name)` returns a
  `Scenario` (raising `KeyError` for an unknown name), and
  `run_scenario(name, seed=None)` runs one and returns the best `ResultMessage`.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Example

```python
import random

from swarmopt.objectives import weighted_quadratic
from swarmopt.swarm import ParticleSwarm, SwarmConfig

config = SwarmConfig(lower=(0, 0, 0), upper=(10, 10, 10), population=100, max_iterations=200)
swarm = ParticleSwarm(weighted_quadratic, config, random.Random(1))
result = swarm.run_once()
print(result.best_position, result.best_fitness)
```

Running a scenario that splits the Rosenbrock search box between workers:

```python
from swarmopt.scenarios import run_scenario

result = run_scenario("rosenbrock_2", seed=7)
print(result.fitness, result.position)
```

## Command line

    swarmopt [quadratic|rastrigin|rosenbrock] [--population N] [--iterations N]
             [--runs N] [--seed N] [--scenario NAME]

Without `--scenario`, the command runs a continuous swarm on the chosen
function (default `quadratic`). The defaults are 1000 particles, 100000
iterations and 5 runs for `quadratic`, and 100 particles, 10000 iterations and
1 run for `rastrigin` and `rosenbrock`, all in the box 0 to 10 per coordinate.
For each run it prints `Run = N` and each improved global best, then the best
particle and fitness of the last run.

With `--scenario NAME` it runs that distributed scenario instead and prints
the best function value and solution.

Either way it ends by printing the processor time used.

## Limits

The region split runs every worker one after another in the same process;
there is no parallel execution and no messaging between processes. The message
classes only encode and decode word lists.