"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hashjing import __version__
from hashjing.config import settings
from hashjing.engine.pipeline import register_transforms
from hashjing.svg.fragments import FragmentConfigurationError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.hashjing_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="HashJing",
        description="Deterministic traits and SVG mandalas from 256-bit seeds",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    register_transforms()

    @app.exception_handler(FragmentConfigurationError)
    async def _fragment_error(request: Request, exc: FragmentConfigurationError) -> JSONResponse:
        logger.error("Fragment configuration error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc), "missing": exc.missing, "invalid": exc.invalid},
        )

    from hashjing.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
