"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration shared by the CLI and the HTTP server."""

    # Seeding (None = ask the time-based provider)
    seed: int | None = None

    # Demo output
    demo_size: int = 8
    demo_bound: int = 8
    record_file: str | None = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    max_batch: int = 10_000

    # Logging
    log_level: str = "INFO"
