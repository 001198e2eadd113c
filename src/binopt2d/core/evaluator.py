"""Genome evaluation: the interface between the GA engine and f(x, y).

Interface:
    OptimizationFunction2D(objective).evaluate(genome) -> fitness

Flow:
    1. decode(genome, config) -> (x, y)
    2. optimization_function(x, y) -> raw value
    3. to_fitness(raw, mode) -> fitness (higher is always better)

The objective must be strictly positive over the configured ranges. Only
the zero case of minimization is given a defined result (+inf); other
precondition violations pass through as plain arithmetic.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Protocol

import numpy as np

from .encoding import decode
from .types import AxisRange, FunctionConfig, GenomeLike, Mode

logger = logging.getLogger(__name__)


class ObjectiveFunction(Protocol):
    """Scalar function of a 2D real point. Must be deterministic."""

    def __call__(self, x: float, y: float) -> float: ...


def to_fitness(value: float, mode: Mode) -> float:
    """Convert a raw function value to a fitness score.

    Args:
        value: Raw objective value.
        mode: Optimization mode.

    Returns:
        ``value`` when maximizing, ``1 / value`` when minimizing.
        A zero value under minimization yields ``+inf``.
    """
    if mode == Mode.MAXIMIZATION:
        return value
    if value == 0:
        logger.debug("Objective returned 0 under minimization; fitness is +inf")
        return math.inf
    return 1 / value


class OptimizationFunction2D:
    """Fitness function for two dimensional function optimization.

    Works with binary genomes of up to 64 bits: the low half of the bits
    encodes X, the high half encodes Y. The function to optimize is either
    injected as ``objective`` or supplied by overriding
    :meth:`optimization_function` in a subclass.

    Example:
        >>> from binopt2d import AxisRange, BinaryGenome, Mode
        >>> fn = OptimizationFunction2D(
        ...     lambda x, y: x * x + y * y + 1.0,
        ...     range_x=AxisRange(-4, 4),
        ...     range_y=AxisRange(-4, 4),
        ...     mode=Mode.MINIMIZATION,
        ... )
        >>> fn.translate(BinaryGenome(value=0, length=32))
        (-4.0, -4.0)
    """

    def __init__(
        self,
        objective: ObjectiveFunction | None = None,
        range_x: AxisRange | None = None,
        range_y: AxisRange | None = None,
        mode: Mode = Mode.MAXIMIZATION,
        config: FunctionConfig | None = None,
    ) -> None:
        """Initialize optimization function.

        Args:
            objective: Function to optimize. May be omitted by subclasses
                that override ``optimization_function``.
            range_x: X variable's range, default [0, 1].
            range_y: Y variable's range, default [0, 1].
            mode: Optimization mode.
            config: Ready-made configuration; takes precedence over
                ``range_x``, ``range_y`` and ``mode`` when given.
        """
        if config is None:
            config = FunctionConfig(
                range_x=range_x if range_x is not None else AxisRange(),
                range_y=range_y if range_y is not None else AxisRange(),
                mode=Mode.parse(mode),
            )
        self.config = config
        self._objective = objective

    @property
    def range_x(self) -> AxisRange:
        """X variable's optimization range."""
        return self.config.range_x

    @range_x.setter
    def range_x(self, value: AxisRange) -> None:
        self.config.range_x = value

    @property
    def range_y(self) -> AxisRange:
        """Y variable's optimization range."""
        return self.config.range_y

    @range_y.setter
    def range_y(self, value: AxisRange) -> None:
        self.config.range_y = value

    @property
    def mode(self) -> Mode:
        """Optimization mode: what kind of extreme to search."""
        return self.config.mode

    @mode.setter
    def mode(self, value: Mode | str) -> None:
        self.config.mode = Mode.parse(value)

    def optimization_function(self, x: float, y: float) -> float:
        """Function to optimize.

        Raises:
            NotImplementedError: No objective injected and not overridden.
        """
        if self._objective is None:
            raise NotImplementedError(
                "No objective given; pass one to the constructor or override optimization_function"
            )
        return self._objective(x, y)

    def translate(self, genome: GenomeLike) -> tuple[float, float]:
        """Translate genotype to phenotype without evaluating the function."""
        return decode(genome, self.config)

    def evaluate(self, genome: GenomeLike) -> float:
        """Evaluate genome.

        Args:
            genome: Genome to evaluate.

        Returns:
            Fitness value. Exceptions raised by the objective propagate.
        """
        x, y = decode(genome, self.config)
        value = self.optimization_function(x, y)
        return to_fitness(value, self.config.mode)

    def evaluate_batch(self, genomes: Iterable[GenomeLike]) -> np.ndarray:
        """Evaluate a batch of genomes.

        Returns:
            Fitness array of shape (n,).
        """
        return np.array([self.evaluate(g) for g in genomes], dtype=np.float64)


__all__ = ["ObjectiveFunction", "OptimizationFunction2D", "to_fitness"]
