"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from hashjing.api import census, health, render, traits

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(traits.router)
api_router.include_router(render.router)
api_router.include_router(census.router)
