import logging
import traceback
from contextlib import asynccontextmanager
from importlib.resources import files
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from inbox_core.config.settings import Settings
from inbox_core.errors import CorruptRecordError, ThreadNotFoundError
from inbox_server.router import router

logger = logging.getLogger("inbox_server")

STATIC_PATH = files("inbox_server").joinpath("static")


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    logger.info(f"Serving threads from {app.state.default_dir}")
    yield
    logger.info("Application shutdown completed")


def create_app(default_dir: str | Path | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Thread Inbox",
        description="Local inbox for user and AI conversation threads",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.default_dir = settings.resolve_dir(default_dir).resolve()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, e: HTTPException) -> JSONResponse:
        logger.warning(f"HTTP {e.status_code}: {e.detail} - {request.method} {request.url}")
        return JSONResponse(
            status_code=e.status_code,
            content={"detail": e.detail},
        )

    @app.exception_handler(ThreadNotFoundError)
    async def not_found_handler(request: Request, e: ThreadNotFoundError) -> JSONResponse:
        logger.warning(f"{e} - {request.method} {request.url}")
        return JSONResponse(
            status_code=404,
            content={"detail": str(e)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, e: RequestValidationError) -> JSONResponse:
        logger.warning(f"Validation error on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request", "errors": jsonable_encoder(e.errors())},
        )

    @app.exception_handler(CorruptRecordError)
    async def corrupt_record_handler(request: Request, e: CorruptRecordError) -> JSONResponse:
        logger.error(f"{e} - {request.method} {request.url}")
        return JSONResponse(
            status_code=500,
            content={"detail": str(e)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, e: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url}:")
        logger.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(e)},
        )

    app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")
    app.include_router(router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app
