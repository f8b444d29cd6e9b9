"""Objective functions minimised by the particle swarms."""

from __future__ import annotations

import math
from collections.abc import Sequence

# The Rastrigin benchmark here uses this value where pi would normally stand,
# and the results of the optimiser depend on it.
RASTRIGIN_PI = 3.415


def _require_length(position: Sequence, length: int, name: str) -> None:
    if len(position) != length:
        raise ValueError(f"{name} expects a position of {length} coordinates, got {len(position)}")


def weighted_quadratic(position: Sequence[float]) -> float:
    """Return 10(x-1)^2 + 20(y-2)^2 + 30(z-3)^2; the minimum 0 lies at (1, 2, 3)."""
    _require_length(position, 3, "weighted_quadratic")
    x, y, z = position
    return 10 * (x - 1) ** 2 + 20 * (y - 2) ** 2 + 30 * (z - 3) ** 2


def rastrigin(position: Sequence[float]) -> float:
    """Return 10*n + sum(x^2 - cos(2*RASTRIGIN_PI*x)) over the n coordinates."""
    if not position:
        raise ValueError("rastrigin expects at least one coordinate")
    return 10 * len(position) + sum(
        x**2 - math.cos(2 * RASTRIGIN_PI * x) for x in position
    )


def rosenbrock(position: Sequence[float]) -> float:
    """Return (1-x)^2 + 100(y-x^2)^2; the minimum 0 lies at (1, 1)."""
    _require_length(position, 2, "rosenbrock")
    x, y = position
    return (1 - x) ** 2 + 100 * (y - x**2) ** 2


def integer_quadratic(position: Sequence[int]) -> int:
    """Return 10(x-10)^2 + 20(y-20)^2 on integer coordinates."""
    _require_length(position, 2, "integer_quadratic")
    x, y = (int(value) for value in position)
    return 10 * (x - 10) * (x - 10) + 20 * (y - 20) * (y - 20)


def integer_rosenbrock(position: Sequence[int]) -> int:
    """Return (1-x)^2 + 100(y-x^2)^2 on integer coordinates."""
    _require_length(position, 2, "integer_rosenbrock")
    x, y = (int(value) for value in position)
    return (1 - x) * (1 - x) + 100 * ((y - x * x) * (y - x * x))