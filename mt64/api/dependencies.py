"""FastAPI dependency injection — provides the GeneratorManager singleton."""

from __future__ import annotations

from mt64.api.generator_manager import GeneratorManager

_generator_manager: GeneratorManager | None = None


def set_generator_manager(manager: GeneratorManager | None) -> None:
    global _generator_manager
    _generator_manager = manager


def get_generator_manager() -> GeneratorManager:
    if _generator_manager is None:
        raise RuntimeError("GeneratorManager not initialized — server not started correctly.")
    return _generator_manager
