"""Argument handling shared by the CLIs."""

from __future__ import annotations

import argparse
from typing import Any

from ..core.config import Binopt2dConfig, default_config, load_config, merge_config
from ..objectives import OBJECTIVES


def add_function_args(parser: argparse.ArgumentParser) -> None:
    """Add config-file and function override arguments."""
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--objective", type=str, default=None, choices=sorted(OBJECTIVES), help="Built-in objective"
    )
    parser.add_argument(
        "--range-x", type=float, nargs=2, default=None, metavar=("MIN", "MAX"), help="X range"
    )
    parser.add_argument(
        "--range-y", type=float, nargs=2, default=None, metavar=("MIN", "MAX"), help="Y range"
    )
    parser.add_argument(
        "--mode", type=str, default=None, choices=["maximization", "minimization"]
    )
    parser.add_argument("--length", type=int, default=None, help="Genome length in bits")
    parser.add_argument("--log-level", type=str, default="WARN", help="DEBUG, INFO, WARN, ERROR")


def resolve_config(args: argparse.Namespace, **extra: Any) -> Binopt2dConfig:
    """Load the config file (if any) and apply command-line overrides."""
    base = load_config(args.config) if args.config else default_config()

    function: dict[str, Any] = {}
    if args.objective is not None:
        function["objective"] = args.objective
    if args.range_x is not None:
        function["range_x"] = {"min": args.range_x[0], "max": args.range_x[1]}
    if args.range_y is not None:
        function["range_y"] = {"min": args.range_y[0], "max": args.range_y[1]}
    if args.mode is not None:
        function["mode"] = args.mode

    overrides: dict[str, Any] = {}
    if function:
        overrides["function"] = function
    if args.length is not None:
        overrides["genome"] = {"length": args.length}
    optimization = {k: v for k, v in extra.items() if v is not None}
    if optimization:
        overrides["optimization"] = optimization

    return merge_config(base, overrides) if overrides else base
