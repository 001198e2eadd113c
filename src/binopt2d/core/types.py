"""Core types for genome decoding and fitness evaluation.

This module defines the canonical types that form the interface
between the genetic search engine and the objective function.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

from .constants import (
    DEFAULT_RANGE_MAX,
    DEFAULT_RANGE_MIN,
    MAX_GENOME_LENGTH,
    MIN_GENOME_LENGTH,
)


@dataclass(frozen=True)
class AxisRange:
    """Closed real interval [min, max] one axis decodes into.

    ``min <= max`` is the caller's contract and is not re-checked here.
    A reversed range decodes in reversed order.
    """

    min: float = DEFAULT_RANGE_MIN
    max: float = DEFAULT_RANGE_MAX

    @property
    def length(self) -> float:
        """Interval length (max - min)."""
        return self.max - self.min

    def contains(self, value: float) -> bool:
        """Check if value lies in the closed interval."""
        return self.min <= value <= self.max


class Mode(str, Enum):
    """Optimization modes: which kind of extreme to search."""

    MAXIMIZATION = "maximization"
    MINIMIZATION = "minimization"

    @classmethod
    def parse(cls, raw: str | Mode) -> Mode:
        """Parse mode from its name or value, case-insensitive."""
        if isinstance(raw, cls):
            return raw
        key = str(raw).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown mode {raw!r}, expected one of {[m.value for m in cls]}")


@dataclass
class FunctionConfig:
    """Mutable evaluation configuration: both axis ranges and the mode.

    Read on every evaluation, so assignments take effect on the next call.
    Mutation while evaluations are in flight must be serialized by the caller.
    """

    range_x: AxisRange = field(default_factory=AxisRange)
    range_y: AxisRange = field(default_factory=AxisRange)
    mode: Mode = Mode.MAXIMIZATION


@runtime_checkable
class GenomeLike(Protocol):
    """Anything exposing a fixed-width unsigned value and its bit length."""

    @property
    def value(self) -> int: ...

    @property
    def length(self) -> int: ...


@dataclass(frozen=True)
class BinaryGenome:
    """Minimal fixed-width binary genome.

    Attributes:
        value: Unsigned integer holding the bits, LSB = bit 0.
        length: Declared bit length, [1, 64].
    """

    value: int
    length: int

    def __post_init__(self) -> None:
        if not MIN_GENOME_LENGTH <= self.length <= MAX_GENOME_LENGTH:
            raise ValueError(
                f"length must be in [{MIN_GENOME_LENGTH}, {MAX_GENOME_LENGTH}], got {self.length}"
            )
        if self.value < 0:
            raise ValueError(f"value must be unsigned, got {self.value}")

    def to_bits(self) -> np.ndarray:
        """Convert to boolean array of ``length`` bits, LSB first."""
        return np.array([(self.value >> i) & 1 for i in range(self.length)], dtype=bool)

    @classmethod
    def from_bits(cls, bits: Sequence[bool] | np.ndarray) -> BinaryGenome:
        """Create from a bit array, LSB first."""
        arr = np.asarray(bits).ravel()
        value = 0
        for i, bit in enumerate(arr):
            if bit:
                value |= 1 << i
        return cls(value=value, length=int(arr.size))
