"""Immutable snapshot of a generator's state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mt64.core.errors import InvalidArgument
from mt64.core.state import STATE_SIZE, GeneratorState

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True, slots=True)
class GeneratorSnapshot:
    """Read-only copy of a generator, safe to keep around or share.

    Restoring a snapshot into any engine resumes the exact output sequence
    from the point the snapshot was taken.
    """

    words: tuple[int, ...]
    cursor: int
    twists: int
    initial_seed: int

    @classmethod
    def from_state(cls, state: GeneratorState, initial_seed: int) -> GeneratorSnapshot:
        return cls(
            words=tuple(state.words),
            cursor=state.cursor,
            twists=state.twists,
            initial_seed=initial_seed,
        )

    def to_state(self) -> GeneratorState:
        self.validate()
        return GeneratorState(words=list(self.words), cursor=self.cursor, twists=self.twists)

    def validate(self) -> None:
        """Reject snapshots that could not have come from a real generator."""
        if len(self.words) != STATE_SIZE:
            raise InvalidArgument(f"snapshot must hold {STATE_SIZE} words, got {len(self.words)}")
        if not 0 <= self.cursor <= STATE_SIZE:
            raise InvalidArgument(f"snapshot cursor {self.cursor} outside [0, {STATE_SIZE}]")
        if self.twists < 0:
            raise InvalidArgument(f"snapshot twist count must be non-negative, got {self.twists}")
        if not 0 <= self.initial_seed <= _MASK64:
            raise InvalidArgument(f"snapshot initial_seed {self.initial_seed} is not an unsigned 64-bit integer")
        if any(not isinstance(w, int) or w < 0 or w > _MASK64 for w in self.words):
            raise InvalidArgument("snapshot words must be unsigned 64-bit integers")

    # -- serialization --

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": list(self.words),
            "cursor": self.cursor,
            "twists": self.twists,
            "initial_seed": self.initial_seed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratorSnapshot:
        try:
            snap = cls(
                words=tuple(int(w) for w in data["words"]),
                cursor=int(data["cursor"]),
                twists=int(data.get("twists", 0)),
                initial_seed=int(data["initial_seed"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidArgument(f"malformed snapshot: {exc}") from exc
        snap.validate()
        return snap
