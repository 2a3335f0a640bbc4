from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import errors
from core.db import Database
from core.log_config import setup_logging
from core.settings import Settings, load_settings
from courses import router as courses_router
from enrollments import router as enrollments_router
from students import router as students_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Open and verify the pool once per process; a dead store is fatal.
        database = await Database.connect(settings)
        try:
            await database.ping(timeout=settings.ping_timeout_s)
        except Exception:
            logger.exception("database_ping_failed")
            await database.close()
            raise
        app.state.database = database
        try:
            yield
        finally:
            app.state.database = None
            await database.close()

    app = FastAPI(title="Course Roster API", lifespan=lifespan)

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    errors.register_error_handlers(app, expose_store_errors=settings.expose_store_errors)

    app.include_router(courses_router.router, prefix="/api", tags=["courses"])
    app.include_router(students_router.router, prefix="/api", tags=["students"])
    app.include_router(enrollments_router.router, prefix="/api", tags=["enrollments"])

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = load_settings()
    logger.info("server_listening host=%s port=%s", settings.host, settings.port)
    uvicorn.run("main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
