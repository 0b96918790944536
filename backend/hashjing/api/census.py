"""POST /api/census — trait distributions over a batch of seeds."""

from __future__ import annotations

from fastapi import APIRouter

from hashjing.engine.census import collection_census
from hashjing.models.census import Census
from hashjing.models.requests import CensusRequest

router = APIRouter()


@router.post("/census", response_model=Census)
async def census(req: CensusRequest) -> Census:
    return collection_census(req.seed_bytes)
