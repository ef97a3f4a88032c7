"""64-bit Mersenne Twister (MT19937-64) engine.

State is a 312-word register of unsigned 64-bit integers plus a cursor.
Seeding fills the register from one word; once every word of a batch has
been read, the whole register is twisted in place and reading starts over
at word 0. Each word is tempered on the way out.

Derived outputs (uniform, randint, randfloat, randdouble, randrange) are
built on top of the raw tempered words. Bounded integers use rejection
sampling so there is no modulo bias.

Not cryptographically secure, and not thread-safe: one owner per instance.
"""

from __future__ import annotations

import logging
import math
import operator
import struct

from mt64.core.enums import Distribution
from mt64.core.errors import InvalidArgument
from mt64.core.snapshot import GeneratorSnapshot
from mt64.core.state import STATE_SIZE, GeneratorState
from mt64.systems.seeding import DEFAULT_SEED, SeedProvider, normalize_seed, time_seed

logger = logging.getLogger(__name__)

W = 64
N = STATE_SIZE
M = 156
R = 31
MATRIX_A = 0xB5026F5AA96619E9
F = 6364136223846793005

# Tempering
U, D = 29, 0x5555555555555555
S, B = 17, 0x71D67FFFEDA60000
T, C = 37, 0xFFF7EEE000000000
L = 43

MASK64 = (1 << W) - 1
LOWER_MASK = (1 << R) - 1
UPPER_MASK = MASK64 & ~LOWER_MASK

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT63_MAX = (1 << 63) - 1

_F32 = struct.Struct("<f")


def _to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    return _F32.unpack(_F32.pack(value))[0]


def _as_int32(value: object, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer, not a bool")
    try:
        result = operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}") from None
    if not INT32_MIN <= result <= INT32_MAX:
        raise InvalidArgument(f"{name}={result} does not fit in a signed 32-bit integer")
    return result


def _as_positive_bound(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"bound must be a number, got {type(value).__name__}")
    bound = float(value)
    if math.isnan(bound) or math.isinf(bound) or bound <= 0.0:
        raise InvalidArgument(f"bound must be a finite number greater than 0.0, got {value!r}")
    return bound


def _as_float32_bound(value: object) -> float:
    bound = _as_positive_bound(value)
    try:
        bound32 = _to_float32(bound)
    except OverflowError:
        raise InvalidArgument(f"bound {bound!r} does not fit in single precision") from None
    if bound32 <= 0.0:
        raise InvalidArgument(f"bound {bound!r} rounds to 0.0 in single precision")
    return bound32


def temper(y: int) -> int:
    """Apply the MT19937-64 output transform to a state word."""
    y ^= (y >> U) & D
    y ^= (y << S) & B
    y ^= (y << T) & C
    y ^= y >> L
    return y


class MersenneTwister64:
    """Seedable MT19937-64 generator with derived distributions.

    ``MersenneTwister64(seed)`` is fully deterministic. Without a seed the
    ``seed_provider`` is consulted (wall-clock milliseconds by default).
    """

    __slots__ = ("_state", "_initial_seed", "_seed_provider")

    def __init__(self, seed: int | None = None, *, seed_provider: SeedProvider = time_seed) -> None:
        self._seed_provider = seed_provider
        self._state = GeneratorState()
        self._initial_seed = 0
        self.initialize(seed_provider() if seed is None else seed)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_seed={self._initial_seed}, "
            f"cursor={self._state.cursor}, twists={self._state.twists})"
        )

    # -- seeding --

    def initialize(self, seed: int) -> None:
        """Fill the register from ``seed``; the next read twists first."""
        seed = normalize_seed(seed)
        mt = self._state.words
        mt[0] = seed
        for i in range(1, N):
            prev = mt[i - 1]
            mt[i] = (F * (prev ^ (prev >> (W - 2))) + i) & MASK64
        self._state.cursor = N
        self._state.twists = 0
        self._initial_seed = seed

    def reseed(self, seed: int | None = None) -> None:
        self.initialize(self._seed_provider() if seed is None else seed)

    @classmethod
    def with_default_seed(cls) -> MersenneTwister64:
        """Engine seeded with 5489, the reference MT19937-64 default."""
        return cls(DEFAULT_SEED)

    # -- state access --

    def get_seed(self) -> int:
        """Return ``words[0]`` as currently stored.

        Right after seeding this is the seed. Every twist rewrites word 0,
        so after the first 312 draws it no longer is; use ``initial_seed``
        for the construction-time value.
        """
        return self._state.words[0]

    @property
    def initial_seed(self) -> int:
        return self._initial_seed

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def twist_count(self) -> int:
        return self._state.twists

    def snapshot(self) -> GeneratorSnapshot:
        return GeneratorSnapshot.from_state(self._state, self._initial_seed)

    def restore(self, snapshot: GeneratorSnapshot) -> None:
        self._state = snapshot.to_state()
        self._initial_seed = snapshot.initial_seed

    # -- core transform --

    def _twist(self) -> None:
        mt = self._state.words
        for i in range(N):
            x = (mt[i] & UPPER_MASK) | (mt[(i + 1) % N] & LOWER_MASK)
            x_a = x >> 1
            if x & 1:
                x_a ^= MATRIX_A
            mt[i] = mt[(i + M) % N] ^ x_a
        self._state.cursor = 0
        self._state.twists += 1
        logger.debug("Twisted state (twist #%d)", self._state.twists)

    def extract_word(self) -> int:
        """Return the next tempered 64-bit word."""
        state = self._state
        if state.exhausted:
            self._twist()
        y = state.words[state.cursor]
        state.cursor += 1
        return temper(y)

    # -- derived distributions --

    def uniform(self) -> float:
        """Uniform double in [0.0, 1.0).

        The top 63 bits of a word divided by 2**63 - 1. The rare words whose
        quotient rounds to exactly 1.0 are discarded.
        """
        while True:
            value = (self.extract_word() >> 1) / INT63_MAX
            if value < 1.0:
                return value

    def randint(self, bound: int) -> int:
        """Uniform integer in [0, bound); ``bound`` must be a positive int32."""
        bound = _as_int32(bound, "bound")
        if bound <= 0:
            raise InvalidArgument(f"bound must be greater than 0, got {bound}")
        while True:
            bits = self.extract_word() >> (W - R)
            val = bits % bound
            # The last partial block of size < bound would overflow int32.
            if bits - val + (bound - 1) <= INT32_MAX:
                return val

    def randfloat(self, bound: float) -> float:
        """Single-precision value in [0.0, bound).

        Draws whose scaled value rounds up to ``bound`` (only possible for
        subnormal bounds or a draw that narrows to 1.0) are discarded.
        """
        bound32 = _as_float32_bound(bound)
        while True:
            value = _to_float32(_to_float32(self.uniform()) * bound32)
            if value < bound32:
                return value

    def randdouble(self, bound: float) -> float:
        """Double-precision value in [0.0, bound)."""
        bound = _as_positive_bound(bound)
        while True:
            value = self.uniform() * bound
            if value < bound:
                return value

    def randrange(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        low = _as_int32(low, "low")
        high = _as_int32(high, "high")
        if low >= high:
            raise InvalidArgument(f"low must be less than high, got low={low} high={high}")
        span = high - low
        if span > INT32_MAX:
            raise InvalidArgument(f"range [{low}, {high}) is wider than a signed 32-bit integer")
        return self.randint(span) + low

    # -- batches --

    def draw(
        self,
        distribution: Distribution,
        count: int,
        *,
        bound: float | None = None,
        low: int | None = None,
        high: int | None = None,
    ) -> list[int] | list[float]:
        """Draw ``count`` values of one kind.

        Parameters are checked before the first word is consumed, so a bad
        request leaves the engine untouched.
        """
        if count < 0:
            raise InvalidArgument(f"count must be non-negative, got {count}")

        match distribution:
            case Distribution.RAW:
                return [self.extract_word() for _ in range(count)]
            case Distribution.UNIFORM:
                return [self.uniform() for _ in range(count)]
            case Distribution.RANDINT:
                b = _as_int32(_require(bound, "bound", distribution), "bound")
                if b <= 0:
                    raise InvalidArgument(f"bound must be greater than 0, got {b}")
                return [self.randint(b) for _ in range(count)]
            case Distribution.RANDFLOAT:
                b = _as_float32_bound(_require(bound, "bound", distribution))
                return [self.randfloat(b) for _ in range(count)]
            case Distribution.RANDDOUBLE:
                b = _as_positive_bound(_require(bound, "bound", distribution))
                return [self.randdouble(b) for _ in range(count)]
            case Distribution.RANDRANGE:
                lo = _as_int32(_require(low, "low", distribution), "low")
                hi = _as_int32(_require(high, "high", distribution), "high")
                if lo >= hi:
                    raise InvalidArgument(f"low must be less than high, got low={lo} high={hi}")
                if hi - lo > INT32_MAX:
                    raise InvalidArgument(f"range [{lo}, {hi}) is wider than a signed 32-bit integer")
                return [self.randrange(lo, hi) for _ in range(count)]

        raise InvalidArgument(f"unsupported distribution {distribution!r}")


def _require(value: object, name: str, distribution: Distribution) -> object:
    if value is None:
        raise InvalidArgument(f"{distribution.name.lower()} requires {name!r}")
    return value
