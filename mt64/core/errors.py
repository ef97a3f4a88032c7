"""Error types raised by the engine."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A caller-supplied argument violates an operation's precondition.

    Raised before any state word is consumed, so a failed call leaves the
    generator exactly where it was.
    """
