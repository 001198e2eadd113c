"""Built-in objective functions.

Each function is strictly positive over the ranges it is intended for
(offsets are added where the textbook form crosses zero), so all of them
can be used in both optimization modes.
"""

from __future__ import annotations

import math
from collections.abc import Callable

Objective = Callable[[float, float], float]


def sample(x: float, y: float) -> float:
    """cos(y) * x * y / (2 - sin(x)), shifted positive on [-4, 4]^2."""
    return (math.cos(y) * x * y) / (2 - math.sin(x)) + 20.0


def sphere(x: float, y: float) -> float:
    """x^2 + y^2 + 1, minimum 1 at the origin."""
    return x * x + y * y + 1.0


def peaks(x: float, y: float) -> float:
    """MATLAB peaks surface, shifted positive on [-3, 3]^2."""
    z = (
        3 * (1 - x) ** 2 * math.exp(-(x**2) - (y + 1) ** 2)
        - 10 * (x / 5 - x**3 - y**5) * math.exp(-(x**2) - y**2)
        - math.exp(-((x + 1) ** 2) - y**2) / 3
    )
    return z + 10.0


def rastrigin(x: float, y: float) -> float:
    """Rastrigin function plus 1, minimum 1 at the origin."""
    a = 10.0
    return (
        2 * a
        + (x * x - a * math.cos(2 * math.pi * x))
        + (y * y - a * math.cos(2 * math.pi * y))
        + 1.0
    )


OBJECTIVES: dict[str, Objective] = {
    "sample": sample,
    "sphere": sphere,
    "peaks": peaks,
    "rastrigin": rastrigin,
}


def get_objective(name: str) -> Objective:
    """Look up a built-in objective by name.

    Raises:
        KeyError: Unknown name; the message lists the valid ones.
    """
    try:
        return OBJECTIVES[name]
    except KeyError:
        raise KeyError(f"Unknown objective {name!r}; choose from {sorted(OBJECTIVES)}") from None
