from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from school_service.api.middleware.request_context import RequestContextMiddleware
from school_service.api.v1.routers import (
    analytics,
    announcements,
    assignments,
    children,
    courses,
    emotions,
    health,
    meetings,
    messages,
    school_events,
    timetable,
    ws,
)
from school_service.application.exceptions import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from school_service.config import settings
from school_service.infrastructure.db.session import engine
from school_service.infrastructure.ws.dispatcher import NotificationDispatcher
from school_service.infrastructure.ws.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    logger.info("School service started, WS endpoint at %s", settings.WS_PATH)

    yield

    logger.info("Shutting down with %d open WS channels", len(app.state.registry))
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="School Notification Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    registry = ConnectionRegistry()
    app.state.registry = registry
    app.state.dispatcher = NotificationDispatcher(registry)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(courses.router)
    app.include_router(assignments.router)
    app.include_router(announcements.router)
    app.include_router(timetable.router)
    app.include_router(emotions.router)
    app.include_router(children.router)
    app.include_router(messages.router)
    app.include_router(meetings.router)
    app.include_router(school_events.router)
    app.include_router(analytics.router)
    app.include_router(ws.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(ForbiddenError)
    async def _forbidden(_req: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})
