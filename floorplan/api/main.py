"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from floorplan.api.routes import router
from floorplan.config import Settings
from floorplan.core.errors import (
    FloorPlanError, MalformedGeometryError, UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[FloorPlanError], int] = {
    MalformedGeometryError: 422,
    UnsupportedFormatError: 404,
}


async def floor_plan_error_handler(request: Request, exc: FloorPlanError) -> JSONResponse:
    status = ERROR_STATUS.get(type(exc), 400)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status, exc.kind)
    return JSONResponse(status_code=status, content={"detail": str(exc), "kind": exc.kind})


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Floor Plan Export",
        description="Room-scan floor plans as SVG and DXF",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FloorPlanError, floor_plan_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app(Settings.from_env())
