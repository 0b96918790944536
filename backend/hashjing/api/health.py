"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from hashjing.engine.registry import get_registry
from hashjing.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", transforms_registered=get_registry().count)
