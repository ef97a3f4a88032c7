"""mt64 — deterministic 64-bit Mersenne Twister (MT19937-64) engine."""

from mt64.core.enums import Distribution
from mt64.core.errors import InvalidArgument
from mt64.core.snapshot import GeneratorSnapshot
from mt64.systems.mersenne import MersenneTwister64
from mt64.systems.seeding import DEFAULT_SEED, fixed_seed, time_seed
from mt64.systems.streams import StreamFactory, derive_seed, spawn

__all__ = [
    "DEFAULT_SEED",
    "Distribution",
    "GeneratorSnapshot",
    "InvalidArgument",
    "MersenneTwister64",
    "StreamFactory",
    "derive_seed",
    "fixed_seed",
    "spawn",
    "time_seed",
]
