"""Core module — types, bit helpers, encoding, evaluator."""

from .encoding import decode, decode_batch, decode_genome, encode_point, resolution
from .evaluator import ObjectiveFunction, OptimizationFunction2D, to_fitness
from .types import AxisRange, BinaryGenome, FunctionConfig, GenomeLike, Mode

__all__ = [
    "AxisRange",
    "BinaryGenome",
    "FunctionConfig",
    "GenomeLike",
    "Mode",
    "decode",
    "decode_batch",
    "decode_genome",
    "encode_point",
    "resolution",
    "ObjectiveFunction",
    "OptimizationFunction2D",
    "to_fitness",
]
