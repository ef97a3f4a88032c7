"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from mt64.api.dependencies import set_generator_manager
from mt64.api.generator_manager import GeneratorManager
from mt64.api.routes import api_router
from mt64.config import EngineConfig
from mt64.systems.seeding import SeedProvider, time_seed
from mt64.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: EngineConfig | None = None, seed_provider: SeedProvider = time_seed) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = EngineConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = GeneratorManager(_config, seed_provider=seed_provider)
        set_generator_manager(manager)
        logger.info("API server started — generator ready.")
        yield
        set_generator_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="mt64",
        description=(
            "64-bit Mersenne Twister (MT19937-64) as a service.\n\n"
            "One shared generator; requests are serialized so the output "
            "sequence is exactly what a single in-process engine would produce.\n\n"
            "Not suitable for cryptographic use."
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Draw", "description": "Batches of raw words, uniforms, bounded ints/floats and ranges."},
            {"name": "State", "description": "Seed, cursor and twist count; snapshot export and restore."},
            {"name": "Control", "description": "Re-seed the shared generator."},
            {"name": "Config", "description": "Read-only engine configuration."},
        ],
    )

    app.include_router(api_router)

    return app
