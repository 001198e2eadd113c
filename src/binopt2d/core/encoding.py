"""Genome encoding and decoding.

This module maps a fixed-width unsigned genome value onto a point of the
two-dimensional search space, and back.

Layout (ENCODING_VERSION = "1.0"), for a genome of L bits:
    bits [0, L//2)      - X sub-field (x_length = L // 2)
    bits [L//2, L)      - Y sub-field (y_length = L - x_length)

Each sub-field is rescaled linearly into its axis range:
    coord = field * range.length / field_max(width) + range.min

A zero-width sub-field (only X, when L = 1) decodes to ``range.min``; an
all-ones sub-field decodes to exactly ``range.max``.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .bits import extract_high_bits, extract_low_bits, field_mask, split_lengths, to_uint64
from .types import AxisRange, FunctionConfig, GenomeLike


def scale_field(field_value: int, width: int, axis_range: AxisRange) -> float:
    """Rescale an unsigned sub-field into its axis range.

    Args:
        field_value: Sub-field integer value.
        width: Sub-field width in bits.
        axis_range: Target interval.

    Returns:
        Decoded coordinate. ``axis_range.min`` for a zero-width field,
        ``axis_range.max`` for an all-ones field. For ordered ranges the
        result never leaves [min, max]; reversed ranges are not clamped.
    """
    field_max = field_mask(width)
    if field_max == 0:
        return float(axis_range.min)
    if field_value == field_max:
        return float(axis_range.max)
    coord = field_value * axis_range.length / field_max + axis_range.min
    if field_value < field_max and axis_range.min <= axis_range.max:
        coord = min(max(coord, axis_range.min), axis_range.max)
    return coord


def decode_genome(
    value: int,
    length: int,
    range_x: AxisRange,
    range_y: AxisRange,
) -> tuple[float, float]:
    """Decode a genome value to its (x, y) phenotype.

    No validation is performed: lengths outside [1, 64] or reversed ranges
    produce degenerate coordinates, not errors.

    Args:
        value: Genome value, reduced to unsigned 64-bit storage.
        length: Declared genome length in bits.
        range_x: X axis range.
        range_y: Y axis range.

    Returns:
        (x, y) coordinate pair.
    """
    value = to_uint64(value)
    x_length, y_length = split_lengths(length)

    x_part = extract_low_bits(value, x_length)
    y_part = extract_high_bits(value, x_length)

    return (
        scale_field(x_part, x_length, range_x),
        scale_field(y_part, y_length, range_y),
    )


def decode(genome: GenomeLike, config: FunctionConfig) -> tuple[float, float]:
    """Decode a genome using the ranges of ``config``."""
    return decode_genome(genome.value, genome.length, config.range_x, config.range_y)


def decode_batch(
    values: Iterable[int],
    length: int,
    range_x: AxisRange,
    range_y: AxisRange,
) -> np.ndarray:
    """Decode many genome values of the same length.

    Returns:
        Array of shape (n, 2) with one (x, y) row per value.
    """
    rows = [decode_genome(int(v), length, range_x, range_y) for v in values]
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


def resolution(width: int, axis_range: AxisRange) -> float:
    """Quantization step of a sub-field of ``width`` bits (0.0 if zero-width)."""
    field_max = field_mask(width)
    if field_max == 0:
        return 0.0
    return axis_range.length / field_max


def quantize(coord: float, width: int, axis_range: AxisRange) -> int:
    """Return the sub-field value whose decode is nearest to ``coord``.

    Coordinates outside the range clamp to its ends.
    """
    field_max = field_mask(width)
    if field_max == 0 or axis_range.length == 0:
        return 0
    ratio = (coord - axis_range.min) / axis_range.length
    ratio = min(max(ratio, 0.0), 1.0)
    return min(int(round(ratio * field_max)), field_max)


def encode_point(
    x: float,
    y: float,
    length: int,
    range_x: AxisRange,
    range_y: AxisRange,
) -> int:
    """Encode a point to the nearest genome value of ``length`` bits.

    decode_genome(encode_point(x, y, ...)) is within half a quantization
    step of (x, y) on each axis for points inside the ranges.

    Args:
        x: X coordinate.
        y: Y coordinate.
        length: Genome length in bits.
        range_x: X axis range.
        range_y: Y axis range.

    Returns:
        Genome value.
    """
    x_length, y_length = split_lengths(length)
    x_part = quantize(x, x_length, range_x)
    y_part = quantize(y, y_length, range_y)
    return (y_part << x_length) | x_part
