"""Test fixed-width bit helpers."""

import pytest

from binopt2d.core.bits import (
    extract_high_bits,
    extract_low_bits,
    field_mask,
    split_lengths,
    to_uint64,
)
from binopt2d.core.constants import UINT64_MAX


def test_field_mask_edges():
    """Test mask values at the width limits."""
    assert field_mask(0) == 0
    assert field_mask(1) == 1
    assert field_mask(32) == 0xFFFFFFFF
    assert field_mask(64) == UINT64_MAX


def test_field_mask_all_widths():
    """Test mask equals 2**w - 1 for every supported width."""
    for width in range(65):
        assert field_mask(width) == 2**width - 1


def test_extract_low_and_high_bits():
    """Test splitting 0b1010 into two 2-bit fields."""
    assert extract_low_bits(0b1010, 2) == 0b10
    assert extract_high_bits(0b1010, 2) == 0b10
    assert extract_low_bits(0b110101, 3) == 0b101
    assert extract_high_bits(0b110101, 3) == 0b110


def test_zero_width_extracts_zero():
    """Test that a zero-width low field is always 0."""
    assert extract_low_bits(UINT64_MAX, 0) == 0
    assert extract_high_bits(0b1011, 0) == 0b1011


def test_split_lengths_invariant():
    """Test x_length + y_length == L and Y takes the odd bit."""
    for length in range(1, 65):
        x_length, y_length = split_lengths(length)
        assert x_length + y_length == length
        assert y_length - x_length in (0, 1)
        assert x_length == length // 2


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (5, 5), (UINT64_MAX, UINT64_MAX), ((1 << 64) | 7, 7), (-1, UINT64_MAX)],
)
def test_to_uint64(value, expected):
    """Test reduction to unsigned 64-bit storage."""
    assert to_uint64(value) == expected
