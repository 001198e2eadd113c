"""binopt2d - binary genome to 2D function optimization bridge.

Decodes fixed-width binary genomes into (x, y) points and turns the value
of a user-supplied function at that point into a fitness score.
"""

__version__ = "0.1.0"

from .core import (  # noqa: F401
    AxisRange,
    BinaryGenome,
    FunctionConfig,
    Mode,
    OptimizationFunction2D,
    decode_genome,
    encode_point,
)

__all__ = [
    "AxisRange",
    "BinaryGenome",
    "FunctionConfig",
    "Mode",
    "OptimizationFunction2D",
    "decode_genome",
    "encode_point",
]
