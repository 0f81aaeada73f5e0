from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import engine, init_db
from app.exceptions import MissingParameter, SnapshotNotFound, SourceUnavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting daily-close-tracker (env=%s)", settings.t212_env.value)
    if not settings.has_credentials():
        logger.warning("T212_API_KEY / T212_API_SECRET 미설정: 포지션 조회가 실패합니다")

    await init_db()
    logger.info("Database tables ready")

    if settings.scheduler_enabled:
        from app.scheduler.scheduler import start_scheduler
        start_scheduler()

    yield

    # Shutdown
    from app.scheduler.scheduler import shutdown_scheduler
    shutdown_scheduler()
    from app.broker.factory import close_all_sources
    await close_all_sources()
    await engine.dispose()
    logger.info("Shutdown complete")


async def _missing_parameter(request: Request, exc: MissingParameter):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _snapshot_not_found(request: Request, exc: SnapshotNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _source_unavailable(request: Request, exc: SourceUnavailable):
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "upstream_status": exc.status_code},
    )


async def _catch_unhandled(request: Request, call_next):
    # CORS 안쪽 미들웨어: 500 응답에도 CORS 헤더 포함
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(e)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Daily Close Tracker",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.middleware("http")(_catch_unhandled)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(MissingParameter, _missing_parameter)
    app.add_exception_handler(SnapshotNotFound, _snapshot_not_found)
    app.add_exception_handler(SourceUnavailable, _source_unavailable)

    from app.api.router import api_router
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
