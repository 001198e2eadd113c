"""GA optimization CLI runner.

Usage:
    python -m binopt2d.cli.run_ga --pop 40 --gen 50 --objective peaks --range-x -3 3 --range-y -3 3
    python -m binopt2d.cli.run_ga --config run.yaml --mode minimization --outdir ./results

Outputs the best genome, its phenotype and fitness as JSON to stdout, and
optionally writes the same summary to <outdir>/summary.json.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from .common import add_function_args, resolve_config


def main(argv: list[str] | None = None) -> int:
    """Run GA optimization.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(description="Optimize a 2D function with a binary GA")
    add_function_args(parser)
    parser.add_argument("--pop", type=int, default=None, help="Population size")
    parser.add_argument("--gen", type=int, default=None, help="Number of generations")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--output", "--outdir", type=str, default=None, dest="output", help="Output directory"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose pymoo output")

    args = parser.parse_args(argv)

    # Import here to avoid loading pymoo at module level
    from ..adapters.pymoo_problem import create_problem, run_ga
    from ..core.constants import ENCODING_VERSION
    from ..core.logging import get_logger, set_log_level

    logger = get_logger("binopt2d.cli.run_ga")
    set_log_level(args.log_level)

    cfg = resolve_config(args, pop_size=args.pop, n_gen=args.gen, seed=args.seed)
    opt = cfg.optimization
    problem = create_problem(cfg)

    logger.info(
        "Starting GA",
        pop_size=opt.pop_size,
        n_gen=opt.n_gen,
        seed=opt.seed,
        genome_length=cfg.genome.length,
        objective=cfg.function.objective,
        mode=cfg.function.mode.value,
    )

    t_start = time.perf_counter()
    with logger.timer("ga_minimize", level="INFO"):
        genome, fitness = run_ga(
            problem,
            pop_size=opt.pop_size,
            n_gen=opt.n_gen,
            seed=opt.seed,
            verbose=args.verbose,
        )
    elapsed = time.perf_counter() - t_start

    x, y = problem.function.translate(genome)
    summary = {
        "genome": {"value": genome.value, "length": genome.length},
        "x": x,
        "y": y,
        "value": problem.function.optimization_function(x, y),
        "fitness": fitness,
        "n_evals": problem.n_evals,
        "elapsed_s": elapsed,
        "encoding_version": ENCODING_VERSION,
        "config": cfg.model_dump(mode="json"),
    }

    if args.output is not None:
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        with open(output_dir / "summary.json", "w") as f:
            json.dump(summary, f, indent=2)
        logger.info("Summary written", path=str(output_dir / "summary.json"))

    print(json.dumps(summary, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
