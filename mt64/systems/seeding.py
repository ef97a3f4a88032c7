"""Seed providers and seed normalisation.

The no-argument engine constructor asks a provider for its seed instead of
reading the clock directly, so tests (and callers who want reproducibility)
can swap the provider out.
"""

from __future__ import annotations

import operator
import time
from typing import Callable

from mt64.core.errors import InvalidArgument

SeedProvider = Callable[[], int]

DEFAULT_SEED = 5489

_MASK64 = (1 << 64) - 1
_INT64_MIN = -(1 << 63)


def time_seed() -> int:
    """Wall-clock milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def fixed_seed(value: int) -> SeedProvider:
    """Return a provider that always yields ``value``."""
    seed = normalize_seed(value)
    return lambda: seed


def normalize_seed(value: object) -> int:
    """Map ``value`` onto an unsigned 64-bit seed.

    Negative values down to -2**63 are read as two's-complement signed
    64-bit seeds. Anything that is not an integer, or does not fit in 64
    bits, raises InvalidArgument.
    """
    if isinstance(value, bool):
        raise InvalidArgument("seed must be an integer, not a bool")
    try:
        seed = operator.index(value)
    except TypeError:
        raise InvalidArgument(f"seed must be an integer, got {type(value).__name__}") from None
    if _INT64_MIN <= seed < 0:
        return seed & _MASK64
    if 0 <= seed <= _MASK64:
        return seed
    raise InvalidArgument(f"seed {seed} does not fit in 64 bits")
