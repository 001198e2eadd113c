"""PyMoo adapter for binary genome optimization.

This module wraps OptimizationFunction2D for use with pymoo's binary GA
operators. Each decision vector is one genome, one boolean per bit,
LSB first.
"""

from __future__ import annotations

import logging

import numpy as np
from pymoo.core.problem import Problem

from ..core.config import Binopt2dConfig
from ..core.constants import MAX_GENOME_LENGTH, MIN_GENOME_LENGTH
from ..core.evaluator import OptimizationFunction2D
from ..core.types import BinaryGenome
from ..objectives import get_objective

logger = logging.getLogger(__name__)


def bits_to_genome(bits: np.ndarray) -> BinaryGenome:
    """Convert one pymoo decision vector to a genome."""
    return BinaryGenome.from_bits(np.asarray(bits, dtype=bool))


class BinaryGenomeProblem(Problem):
    """PyMoo Problem wrapper for 2D function optimization.

    pymoo minimizes, and fitness is always "higher is better", so the
    single objective is ``-fitness`` regardless of the optimization mode.
    """

    N_OBJ = 1

    def __init__(
        self,
        function: OptimizationFunction2D,
        genome_length: int = 32,
        **kwargs,
    ) -> None:
        """Initialize binary genome problem.

        Args:
            function: Configured fitness function.
            genome_length: Number of bits per genome, [1, 64].
            **kwargs: Additional arguments passed to pymoo Problem.
        """
        if not MIN_GENOME_LENGTH <= genome_length <= MAX_GENOME_LENGTH:
            raise ValueError(
                f"genome_length must be in [{MIN_GENOME_LENGTH}, {MAX_GENOME_LENGTH}], "
                f"got {genome_length}"
            )

        super().__init__(
            n_var=genome_length,
            n_obj=self.N_OBJ,
            xl=0,
            xu=1,
            vtype=bool,
            **kwargs,
        )

        self.function = function
        self.genome_length = genome_length
        self._n_evals = 0

    def _evaluate(
        self,
        X: np.ndarray,
        out: dict,
        *args,
        **kwargs,
    ) -> None:
        """Evaluate population.

        Args:
            X: Boolean decision matrix of shape (pop_size, genome_length).
            out: Output dict for F.
        """
        n_pop = X.shape[0]
        F = np.zeros((n_pop, self.N_OBJ), dtype=np.float64)

        for i, bits in enumerate(X):
            F[i, 0] = -self.function.evaluate(bits_to_genome(bits))
            self._n_evals += 1

        out["F"] = F

    @property
    def n_evals(self) -> int:
        """Total number of evaluations performed."""
        return self._n_evals


def create_problem(config: Binopt2dConfig) -> BinaryGenomeProblem:
    """Create BinaryGenomeProblem from a loaded configuration.

    Args:
        config: Root configuration (function, genome length).

    Returns:
        Configured BinaryGenomeProblem.
    """
    function = OptimizationFunction2D(
        get_objective(config.function.objective),
        config=config.function.to_function_config(),
    )
    return BinaryGenomeProblem(function, genome_length=config.genome.length)


def run_ga(
    problem: BinaryGenomeProblem,
    pop_size: int = 40,
    n_gen: int = 50,
    seed: int = 42,
    verbose: bool = False,
) -> tuple[BinaryGenome, float]:
    """Run a binary GA and return the best genome and its fitness.

    Uses binary random sampling, two-point crossover and bit-flip mutation.
    """
    # Import here to avoid loading the algorithm stack at module level
    from pymoo.algorithms.soo.nonconvex.ga import GA
    from pymoo.operators.crossover.pntx import TwoPointCrossover
    from pymoo.operators.mutation.bitflip import BitflipMutation
    from pymoo.operators.sampling.rnd import BinaryRandomSampling
    from pymoo.optimize import minimize
    from pymoo.termination import get_termination

    algorithm = GA(
        pop_size=pop_size,
        sampling=BinaryRandomSampling(),
        crossover=TwoPointCrossover(),
        mutation=BitflipMutation(),
        eliminate_duplicates=True,
    )
    result = minimize(
        problem,
        algorithm,
        get_termination("n_gen", n_gen),
        seed=seed,
        verbose=verbose,
    )

    X = np.atleast_2d(result.X)
    F = np.atleast_1d(np.asarray(result.F, dtype=np.float64).ravel())
    best = int(np.argmin(F))
    genome = bits_to_genome(X[best])
    logger.debug(
        "GA finished: n_evals=%d best_value=%d best_fitness=%g",
        problem.n_evals,
        genome.value,
        -F[best],
    )
    return genome, float(-F[best])
