"""Mandala rendering endpoints: JSON, raw SVG and SSE progress stream."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response, StreamingResponse

from hashjing.dependencies import get_fragments
from hashjing.engine.context import MandalaContext
from hashjing.engine.pipeline import create_pipeline, render_seed
from hashjing.models.requests import SeedRequest
from hashjing.models.responses import RenderResponse
from hashjing.seeds import parse_seed

router = APIRouter()


_SENTINEL = object()  # marks end of queue


def _render_response(ctx: MandalaContext, elapsed_ms: float) -> RenderResponse:
    return RenderResponse.from_context(
        ctx,
        elapsed_ms,
        svg=ctx.svg,
        svg_bytes=len(ctx.document),
    )


async def _stream_render(seed: bytes, fragments: dict[str, bytes]) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()
    ctx = MandalaContext(seed=seed, fragments=fragments)
    pipeline = create_pipeline()
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        try:
            for progress in pipeline.run_streaming(ctx):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        except Exception as e:
            loop.call_soon_threadsafe(queue.put_nowait, {"type": "error", "message": str(e)})
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    loop.run_in_executor(None, _run_pipeline)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        if item.get("type") == "error":
            yield f"event: error\ndata: {json.dumps(item)}\n\n"
            return
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"

    response = _render_response(ctx, (time.perf_counter() - start) * 1000)
    yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/render", response_model=RenderResponse)
async def render(
    req: SeedRequest,
    fragments: dict[str, bytes] = Depends(get_fragments),
) -> RenderResponse:
    start = time.perf_counter()
    ctx = render_seed(req.seed_bytes, fragments)
    return _render_response(ctx, (time.perf_counter() - start) * 1000)


@router.post("/render/stream")
async def render_stream(
    req: SeedRequest,
    fragments: dict[str, bytes] = Depends(get_fragments),
) -> StreamingResponse:
    return StreamingResponse(
        _stream_render(req.seed_bytes, fragments),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.get("/render/{seed}.svg")
async def render_svg(
    seed: str,
    fragments: dict[str, bytes] = Depends(get_fragments),
) -> Response:
    try:
        seed_bytes = parse_seed(seed)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    ctx = render_seed(seed_bytes, fragments)
    return Response(content=ctx.document, media_type="image/svg+xml")
