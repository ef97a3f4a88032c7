"""Mutable recurrence register owned by a single generator."""

from __future__ import annotations

from dataclasses import dataclass, field

STATE_SIZE = 312


@dataclass(slots=True)
class GeneratorState:
    """The 312-word register plus the read cursor.

    ``cursor == STATE_SIZE`` means the current batch is exhausted and the
    next read has to twist first. ``twists`` counts twists since seeding.
    """

    words: list[int] = field(default_factory=lambda: [0] * STATE_SIZE)
    cursor: int = STATE_SIZE
    twists: int = 0

    @property
    def exhausted(self) -> bool:
        return self.cursor >= STATE_SIZE
