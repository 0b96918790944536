"""POST /api/traits — decode and score a seed without rendering."""

from __future__ import annotations

import time

from fastapi import APIRouter

from hashjing.engine.config import PipelineConfig
from hashjing.engine.pipeline import render_seed
from hashjing.models.requests import SeedRequest
from hashjing.models.responses import TraitsResponse

router = APIRouter()


@router.post("/traits", response_model=TraitsResponse)
async def traits(req: SeedRequest) -> TraitsResponse:
    start = time.perf_counter()
    ctx = render_seed(req.seed_bytes, config=PipelineConfig(render_document=False))
    return TraitsResponse.from_context(ctx, (time.perf_counter() - start) * 1000)
