"""Draw recording — writes demo batches to a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mt64.core.enums import Distribution

logger = logging.getLogger(__name__)


class DrawRecorder:
    """Accumulates labelled batches of draws and flushes them to JSON."""

    __slots__ = ("_path", "_seed", "_batches")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._batches: list[dict[str, Any]] = []

    @property
    def batches(self) -> list[dict[str, Any]]:
        return self._batches

    def record(
        self,
        distribution: Distribution,
        values: list[int] | list[float],
        params: dict[str, Any] | None = None,
    ) -> None:
        self._batches.append(
            {
                "distribution": distribution.name.lower(),
                "params": dict(params or {}),
                "values": list(values),
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        payload = {
            "version": "1.0",
            "seed": self._seed,
            "total_batches": len(self._batches),
            "batches": self._batches,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Draws saved to %s (%d batches)", self._path, len(self._batches))
