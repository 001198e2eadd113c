"""Test the pymoo binary genome adapter."""

import numpy as np
import pytest

from binopt2d.adapters.pymoo_problem import (
    BinaryGenomeProblem,
    bits_to_genome,
    create_problem,
    run_ga,
)
from binopt2d.core.config import default_config, merge_config
from binopt2d.core.evaluator import OptimizationFunction2D
from binopt2d.core.types import AxisRange, BinaryGenome, Mode


@pytest.fixture
def sphere_min(sphere):
    return OptimizationFunction2D(
        sphere,
        range_x=AxisRange(-4.0, 4.0),
        range_y=AxisRange(-4.0, 4.0),
        mode=Mode.MINIMIZATION,
    )


def test_problem_config(sphere_min):
    """Test the problem has one boolean variable per bit and one objective."""
    problem = BinaryGenomeProblem(sphere_min, genome_length=16)

    assert problem.n_var == 16
    assert problem.n_obj == 1
    assert problem.genome_length == 16


@pytest.mark.parametrize("length", [0, 65])
def test_problem_rejects_bad_length(sphere_min, length):
    """Test genome length outside [1, 64] is rejected."""
    with pytest.raises(ValueError, match="genome_length"):
        BinaryGenomeProblem(sphere_min, genome_length=length)


def test_problem_objective_is_negated_fitness(sphere_min):
    """Test F = -fitness for each row."""
    problem = BinaryGenomeProblem(sphere_min, genome_length=8)
    genomes = [BinaryGenome(value=v, length=8) for v in (0, 0x77, 0xFF)]
    X = np.array([g.to_bits() for g in genomes])

    out = problem.evaluate(X, return_as_dictionary=True)

    expected = [-sphere_min.evaluate(g) for g in genomes]
    np.testing.assert_allclose(out["F"][:, 0], expected)
    assert problem.n_evals == 3


def test_bits_to_genome_roundtrip():
    """Test pymoo rows convert to genomes LSB first."""
    genome = bits_to_genome(np.array([1, 0, 1, 1], dtype=bool))

    assert genome == BinaryGenome(value=0b1101, length=4)


def test_create_problem_from_config():
    """Test building the problem from a configuration."""
    cfg = merge_config(
        default_config(),
        {"function": {"objective": "sphere", "mode": "minimization"}, "genome": {"length": 12}},
    )

    problem = create_problem(cfg)

    assert problem.n_var == 12
    assert problem.function.mode is Mode.MINIMIZATION


def test_run_ga_smoke(sphere_min):
    """Smoke test for a short GA run on the shifted sphere."""
    problem = BinaryGenomeProblem(sphere_min, genome_length=16)

    genome, fitness = run_ga(problem, pop_size=20, n_gen=10, seed=1)

    assert genome.length == 16
    assert 0.0 < fitness <= 1.0
    assert fitness == pytest.approx(sphere_min.evaluate(genome))
    assert problem.n_evals >= 20
