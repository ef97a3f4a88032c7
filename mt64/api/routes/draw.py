"""POST /api/v1/draw/{distribution} — batches from the shared generator."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mt64.api.dependencies import get_generator_manager
from mt64.api.generator_manager import GeneratorManager
from mt64.api.schemas import DrawResponse
from mt64.core.enums import Distribution
from mt64.core.errors import InvalidArgument

router = APIRouter()


@router.post("/draw/{distribution}", response_model=DrawResponse)
def draw(
    distribution: str,
    count: int = Query(1, ge=0, description="Number of values to draw"),
    bound: float | None = Query(None, description="Upper bound for randint / randfloat / randdouble"),
    low: int | None = Query(None, description="Inclusive lower end for randrange"),
    high: int | None = Query(None, description="Exclusive upper end for randrange"),
    manager: GeneratorManager = Depends(get_generator_manager),
) -> DrawResponse:
    if count > manager.config.max_batch:
        raise HTTPException(status_code=422, detail=f"count must be at most {manager.config.max_batch}")
    try:
        dist = Distribution.from_name(distribution)
        if dist == Distribution.RANDINT and bound is not None:
            if not float(bound).is_integer():
                raise InvalidArgument(f"randint bound must be an integer, got {bound}")
            bound = int(bound)
        values, cursor = manager.draw(dist, count, bound=bound, low=low, high=high)
    except InvalidArgument as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return DrawResponse(
        distribution=dist.name.lower(),
        count=len(values),
        values=values,
        cursor=cursor,
    )
