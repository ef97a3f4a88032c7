"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SeedResponse(BaseModel):
    seed: int = Field(description="Current value of state word 0 (changes after each twist)")
    initial_seed: int = Field(description="Seed the generator was last initialized with")


class StateResponse(BaseModel):
    cursor: int = Field(ge=0, le=312)
    twists: int = Field(ge=0)
    initial_seed: int
    draws_served: int = 0


class SnapshotSchema(BaseModel):
    words: list[int] = Field(min_length=312, max_length=312)
    cursor: int = Field(ge=0, le=312)
    twists: int = Field(0, ge=0)
    initial_seed: int = Field(ge=0, le=(1 << 64) - 1)


class DrawResponse(BaseModel):
    distribution: str
    count: int
    values: list[int] | list[float]
    cursor: int


class ControlResponse(BaseModel):
    status: str
    message: str
    initial_seed: int


class EngineConfigResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    seed: int | None
    demo_size: int
    demo_bound: int
    max_batch: int
    log_level: str
