"""Core constants for binopt2d.

This module defines system-wide invariants such as:
- Genome width limits (the genome value is an unsigned 64-bit integer)
- The default axis range
- The encoding version (bump when the bit layout changes)
"""

from __future__ import annotations

# Genome storage
MAX_GENOME_LENGTH = 64
MIN_GENOME_LENGTH = 1
UINT64_MAX = (1 << MAX_GENOME_LENGTH) - 1

# Axis defaults
DEFAULT_RANGE_MIN = 0.0
DEFAULT_RANGE_MAX = 1.0

# Layout: X = low floor(L/2) bits, Y = remaining high bits
ENCODING_VERSION = "1.0"
