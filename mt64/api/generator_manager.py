"""GeneratorManager — owns the one engine shared by every request.

The engine offers no synchronization of its own. FastAPI runs sync route
handlers on a thread pool, so every access goes through ``self._lock``.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from mt64.core.enums import Distribution
from mt64.core.snapshot import GeneratorSnapshot
from mt64.systems.mersenne import MersenneTwister64
from mt64.systems.seeding import SeedProvider, time_seed

if TYPE_CHECKING:
    from mt64.config import EngineConfig

logger = logging.getLogger(__name__)


class GeneratorManager:
    """Serializes access to a single MersenneTwister64."""

    def __init__(self, config: EngineConfig, seed_provider: SeedProvider = time_seed) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._engine = MersenneTwister64(config.seed, seed_provider=seed_provider)
        self._draws_served = 0
        logger.info("GeneratorManager ready (initial_seed=%d)", self._engine.initial_seed)

    @property
    def draws_served(self) -> int:
        return self._draws_served

    def draw(
        self,
        distribution: Distribution,
        count: int,
        *,
        bound: float | None = None,
        low: int | None = None,
        high: int | None = None,
    ) -> tuple[list[int] | list[float], int]:
        """Draw a batch; returns the values and the cursor after drawing."""
        with self._lock:
            values = self._engine.draw(distribution, count, bound=bound, low=low, high=high)
            self._draws_served += len(values)
            return values, self._engine.cursor

    def seeds(self) -> tuple[int, int]:
        """Return ``(get_seed(), initial_seed)``."""
        with self._lock:
            return self._engine.get_seed(), self._engine.initial_seed

    def status(self) -> tuple[int, int, int, int]:
        """Return ``(cursor, twists, initial_seed, draws_served)`` read under one lock."""
        with self._lock:
            return (
                self._engine.cursor,
                self._engine.twist_count,
                self._engine.initial_seed,
                self._draws_served,
            )

    def snapshot(self) -> GeneratorSnapshot:
        with self._lock:
            return self._engine.snapshot()

    def restore(self, snapshot: GeneratorSnapshot) -> None:
        with self._lock:
            self._engine.restore(snapshot)
        logger.info("GeneratorManager restored (cursor=%d, twists=%d)", snapshot.cursor, snapshot.twists)

    def reseed(self, seed: int | None = None) -> int:
        with self._lock:
            self._engine.reseed(seed)
            self._draws_served = 0
            new_seed = self._engine.initial_seed
        logger.info("GeneratorManager reseeded (initial_seed=%d)", new_seed)
        return new_seed
