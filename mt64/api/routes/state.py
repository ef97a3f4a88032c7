"""GET /api/v1/seed, /state and /snapshot — generator inspection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mt64.api.dependencies import get_generator_manager
from mt64.api.generator_manager import GeneratorManager
from mt64.api.schemas import SeedResponse, SnapshotSchema, StateResponse
from mt64.core.errors import InvalidArgument
from mt64.core.snapshot import GeneratorSnapshot

router = APIRouter()


@router.get("/seed", response_model=SeedResponse)
def get_seed(manager: GeneratorManager = Depends(get_generator_manager)) -> SeedResponse:
    seed, initial_seed = manager.seeds()
    return SeedResponse(seed=seed, initial_seed=initial_seed)


@router.get("/state", response_model=StateResponse)
def get_state(manager: GeneratorManager = Depends(get_generator_manager)) -> StateResponse:
    cursor, twists, initial_seed, draws_served = manager.status()
    return StateResponse(
        cursor=cursor,
        twists=twists,
        initial_seed=initial_seed,
        draws_served=draws_served,
    )


@router.get("/snapshot", response_model=SnapshotSchema)
def get_snapshot(manager: GeneratorManager = Depends(get_generator_manager)) -> SnapshotSchema:
    return SnapshotSchema(**manager.snapshot().to_dict())


@router.put("/snapshot", response_model=StateResponse)
def put_snapshot(
    body: SnapshotSchema,
    manager: GeneratorManager = Depends(get_generator_manager),
) -> StateResponse:
    try:
        snap = GeneratorSnapshot.from_dict(body.model_dump())
    except InvalidArgument as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    manager.restore(snap)
    return get_state(manager)
