"""
WEB 420 API: FastAPI Application Factory
========================================

What:  Builds the ASGI application served by uvicorn.
How:   create_app() assembles middleware, exception handlers and routers.
Who:   uvicorn loads `web420.main:app`; tests wrap the same app in an
       httpx ASGITransport.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:                                            │
    │    /api/signup /api/login      (users)              │
    │    /api/composers[/{id}]       (composers)          │
    │    /api/persons                (persons)            │
    │    /api/teams[/{id}[/players]] (teams)              │
    │    /api/customers[/{u}/invoices] (customers)        │
    │    /health                                          │
    │                                                     │
    │  Exception Handlers:                                │
    │    Validation→400  Duplicate/Invalid creds→401      │
    │    NotFound→404  Unexpected→500  Database→501       │
    └─────────────────────────────────────────────────────┘

API docs: Swagger UI at /api-docs, ReDoc at /redoc.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import make_url

from web420 import __version__
from web420.config import settings
from web420.database import dispose_engine
from web420.exceptions import (
    DatabaseError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
    Web420Error,
)
from web420.middleware.logging import RequestLoggingMiddleware
from web420.middleware.request_id import RequestIDFilter, RequestIDMiddleware, request_id_var
from web420.routes import composers, customers, health, persons, teams, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] web420.services.auth_service [1f0c9a2b]: User logged in: alice
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Per-request access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("WEB 420 API %s starting up...", __version__)
    # Password is masked by render_as_string(hide_password=True)
    logger.info("Database: %s", make_url(settings.database_url).render_as_string(hide_password=True))
    logger.info("bcrypt work factor: %d", settings.bcrypt_rounds)
    logger.info(
        "Application started and listening on http://%s:%d (docs at /api-docs)",
        settings.backend_host,
        settings.backend_port,
    )

    yield

    logger.info("WEB 420 API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: dict | None = None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

        ValidationError          → 400
        DuplicateUsernameError   → 401
        InvalidCredentialsError  → 401
        NotFoundError            → 404
        UnexpectedError          → 500
        DatabaseError            → 501
        Web420Error (base)       → 500
        Exception (fallback)     → 500

    `context` is logged, never returned, except for ValidationError where
    it names the offending field.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s", exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(DuplicateUsernameError)
    async def handle_duplicate_username(request: Request, exc: DuplicateUsernameError):
        return JSONResponse(
            status_code=401,
            content=_error_body("duplicate_username", exc.message),
        )

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
        # Same body for unknown user and wrong password
        return JSONResponse(
            status_code=401,
            content=_error_body("invalid_credentials", exc.message),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=501,
            content=_error_body("database_error", exc.message),
        )

    @app.exception_handler(UnexpectedError)
    async def handle_unexpected_app_error(request: Request, exc: UnexpectedError):
        logger.error("Unexpected error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", exc.message),
        )

    @app.exception_handler(Web420Error)
    async def handle_app_error(request: Request, exc: Web420Error):
        # Subclasses without a handler of their own land here
        logger.error("Unhandled application error: %s | Context: %s", exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged server-side only."""
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="WEB 420 RESTful APIs",
        description=(
            "Composers, persons, teams, customer invoices, and user signup/login "
            "over an async SQL store."
        ),
        version=__version__,
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(composers.router)
    app.include_router(persons.router)
    app.include_router(teams.router)
    app.include_router(customers.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: `web420` serves the app on BACKEND_HOST:BACKEND_PORT."""
    import uvicorn

    uvicorn.run(
        "web420.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
