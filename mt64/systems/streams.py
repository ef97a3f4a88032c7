"""Domain-separated seed derivation using xxhash.

One master seed fans out into any number of independent engines:

    child_seed = xxh64(master_seed, domain, stream_id)

The derivation is a pure function of its inputs, so a run that spawns the
same (domain, stream_id) pairs from the same master seed is reproducible no
matter in which order the children are created.
"""

from __future__ import annotations

import logging
import struct

import xxhash

from mt64.systems.mersenne import MersenneTwister64
from mt64.systems.seeding import normalize_seed

logger = logging.getLogger(__name__)

_PAYLOAD = struct.Struct("<QQq")
_MASK64 = (1 << 64) - 1


def derive_seed(master_seed: int, domain: int, stream_id: int = 0) -> int:
    """Return the 64-bit child seed for ``(domain, stream_id)``."""
    payload = _PAYLOAD.pack(normalize_seed(master_seed), domain & _MASK64, stream_id)
    return xxhash.xxh64(payload).intdigest()


def spawn(master_seed: int, domain: int, stream_id: int = 0) -> MersenneTwister64:
    return MersenneTwister64(derive_seed(master_seed, domain, stream_id))


class StreamFactory:
    """Spawns child engines from one master seed."""

    __slots__ = ("_master_seed",)

    def __init__(self, master_seed: int) -> None:
        self._master_seed = normalize_seed(master_seed)

    @property
    def master_seed(self) -> int:
        return self._master_seed

    def seed_for(self, domain: int, stream_id: int = 0) -> int:
        return derive_seed(self._master_seed, domain, stream_id)

    def spawn(self, domain: int, stream_id: int = 0) -> MersenneTwister64:
        seed = self.seed_for(domain, stream_id)
        logger.debug("Spawned stream domain=%d id=%d seed=%d", domain, stream_id, seed)
        return MersenneTwister64(seed)
