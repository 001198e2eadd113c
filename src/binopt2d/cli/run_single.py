"""Single genome evaluation CLI.

Usage:
    python -m binopt2d.cli.run_single --length 16 --value 1234 --objective sphere
    python -m binopt2d.cli.run_single --config run.yaml --bits 0101100111010010

Outputs JSON with the genome, its phenotype, the raw function value and
the fitness to stdout.
"""

from __future__ import annotations

import argparse
import json

import numpy as np

from .common import add_function_args, resolve_config


def main(argv: list[str] | None = None) -> int:
    """Run single genome evaluation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(description="Decode and evaluate a single genome")
    add_function_args(parser)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--value", type=int, default=None, help="Genome value (unsigned int)")
    group.add_argument("--bits", type=str, default=None, help="Genome bits, MSB first")
    group.add_argument("--random", action="store_true", help="Use random genome")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")

    args = parser.parse_args(argv)
    if args.value is not None and args.value < 0:
        parser.error(f"--value must be unsigned, got {args.value}")
    if args.bits is not None and (not args.bits.strip() or set(args.bits.strip()) - {"0", "1"}):
        parser.error(f"--bits must contain only 0 and 1, got {args.bits!r}")

    from ..core.evaluator import OptimizationFunction2D
    from ..core.logging import get_logger, set_log_level
    from ..core.types import BinaryGenome
    from ..objectives import get_objective

    logger = get_logger("binopt2d.cli.run_single")
    set_log_level(args.log_level)

    if args.bits is not None:
        # MSB-first text, so reverse into the LSB-first layout
        bits = [c == "1" for c in reversed(args.bits.strip())]
        genome = BinaryGenome.from_bits(bits)
        if args.length is None:
            args.length = genome.length
    cfg = resolve_config(args)
    length = cfg.genome.length

    if args.bits is not None:
        genome = BinaryGenome(value=genome.value, length=length)
    elif args.random:
        rng = np.random.default_rng(args.seed)
        genome = BinaryGenome.from_bits(rng.integers(0, 2, size=length).astype(bool))
    else:
        genome = BinaryGenome(value=args.value or 0, length=length)

    function = OptimizationFunction2D(
        get_objective(cfg.function.objective),
        config=cfg.function.to_function_config(),
    )

    with logger.timer("evaluate"):
        x, y = function.translate(genome)
        raw = function.optimization_function(x, y)
        fitness = function.evaluate(genome)

    output = {
        "genome": {"value": genome.value, "length": genome.length},
        "objective": cfg.function.objective,
        "mode": cfg.function.mode.value,
        "x": x,
        "y": y,
        "value": raw,
        "fitness": fitness,
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
