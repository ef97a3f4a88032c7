"""Engine systems: the MT19937-64 generator, seeding, derived streams."""

from mt64.systems.mersenne import MersenneTwister64
from mt64.systems.seeding import DEFAULT_SEED, fixed_seed, time_seed
from mt64.systems.streams import StreamFactory, derive_seed

__all__ = ["DEFAULT_SEED", "MersenneTwister64", "StreamFactory", "derive_seed", "fixed_seed", "time_seed"]
