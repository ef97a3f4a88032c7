"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique

from mt64.core.errors import InvalidArgument


@unique
class Distribution(IntEnum):
    """Output operations that can be requested in batches."""

    RAW = 0          # tempered 64-bit word
    UNIFORM = 1      # float in [0, 1)
    RANDINT = 2      # int in [0, bound)
    RANDFLOAT = 3    # single precision in [0, bound)
    RANDDOUBLE = 4   # double precision in [0, bound)
    RANDRANGE = 5    # int in [low, high)

    @classmethod
    def from_name(cls, name: str) -> Distribution:
        try:
            return cls[name.upper()]
        except KeyError:
            valid = ", ".join(d.name.lower() for d in cls)
            raise InvalidArgument(f"unknown distribution {name!r} (expected one of: {valid})") from None
