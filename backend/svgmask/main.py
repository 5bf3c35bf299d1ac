"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgmask.config import settings
from svgmask.errors import SvgMaskError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgmask_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _conversion_error_handler(request: Request, exc: SvgMaskError) -> JSONResponse:
    logger.warning("%s %s rejected: %s (%s)", request.method, request.url.path, exc.kind.value, exc.message)
    return JSONResponse(status_code=422, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgmask",
        description="SVG icon → objectBoundingBox mask snippets",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SvgMaskError, _conversion_error_handler)

    from svgmask.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
