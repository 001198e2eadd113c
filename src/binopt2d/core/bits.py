"""Fixed-width unsigned bit helpers.

All helpers are defined for widths in [0, 64]. A zero-width field has
mask 0 and always extracts to 0.
"""

from __future__ import annotations

from .constants import UINT64_MAX


def field_mask(width: int) -> int:
    """Return the largest unsigned value representable in ``width`` bits.

    Args:
        width: Field width in bits, [0, 64].

    Returns:
        ``2**width - 1`` (0 for width 0, ``UINT64_MAX`` for width 64).
    """
    if width <= 0:
        return 0
    return (1 << width) - 1


def to_uint64(value: int) -> int:
    """Reduce an integer to unsigned 64-bit storage (modulo 2**64)."""
    return int(value) & UINT64_MAX


def extract_low_bits(value: int, width: int) -> int:
    """Return the low-order ``width`` bits of ``value``."""
    return value & field_mask(width)


def extract_high_bits(value: int, shift: int) -> int:
    """Return ``value`` shifted right by ``shift`` bits.

    No mask is applied: the result is every bit above ``shift``.
    """
    return value >> shift


def split_lengths(length: int) -> tuple[int, int]:
    """Split a genome length into (x_length, y_length).

    Y takes the extra bit when ``length`` is odd.
    """
    x_length = length // 2
    return x_length, length - x_length
