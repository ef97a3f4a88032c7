"""GET /api/v1/config — expose engine configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mt64.api.dependencies import get_generator_manager
from mt64.api.generator_manager import GeneratorManager
from mt64.api.schemas import EngineConfigResponse

router = APIRouter()


@router.get("/config", response_model=EngineConfigResponse)
def get_config(
    manager: GeneratorManager = Depends(get_generator_manager),
) -> EngineConfigResponse:
    cfg = manager.config
    return EngineConfigResponse(
        seed=cfg.seed,
        demo_size=cfg.demo_size,
        demo_bound=cfg.demo_bound,
        max_batch=cfg.max_batch,
        log_level=cfg.log_level,
    )
