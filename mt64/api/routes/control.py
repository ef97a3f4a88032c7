"""POST /api/v1/control/reseed — re-initialize the shared generator."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mt64.api.dependencies import get_generator_manager
from mt64.api.generator_manager import GeneratorManager
from mt64.api.schemas import ControlResponse
from mt64.core.errors import InvalidArgument

router = APIRouter()


@router.post("/control/reseed", response_model=ControlResponse)
def reseed(
    seed: int | None = Query(None, description="New seed; omit for a time-derived one"),
    manager: GeneratorManager = Depends(get_generator_manager),
) -> ControlResponse:
    try:
        new_seed = manager.reseed(seed)
    except InvalidArgument as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ControlResponse(status="ok", message="Generator reseeded.", initial_seed=new_seed)
