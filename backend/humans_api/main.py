"""
Humans API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn humans_api.main:app` or the `humans-api` script).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌─────────┐ ┌──────┐ ┌──────┐ ┌───────┐ │
    │  │ Req ID │→│ Logging │→│ GZip │→│ CORS │→│ Error │ │
    │  └────────┘ └─────────┘ └──────┘ └──────┘ └───────┘ │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET|POST /humans   GET|PUT|DELETE          │
    │  /humans/{id}   GET /health                         │
    │                                                     │
    │  Exception Handlers:                                │
    │  Body decode→400 │ NotFound→404 │ Database→500      │
    │  Uncaught (Error middleware)→500                    │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the HumanStore from settings (unless one was injected)
    3. Bootstrap the humans table; failure aborts startup

    Shutdown:
    1. Dispose the store's engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from humans_api import __version__
from humans_api.config import settings
from humans_api.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    HumansAPIError,
    NotFoundError,
)
from humans_api.middleware.errors import UnhandledErrorMiddleware, error_response
from humans_api.middleware.logging import RequestLoggingMiddleware
from humans_api.middleware.request_id import RequestIDMiddleware, request_id_var
from humans_api.routes import health, humans, root
from humans_api.services.human_store import HumanStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once during app startup, before anything else logs.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build and bootstrap the store on startup; dispose it on shutdown.

    The table is created here and only here, never per request. If it can't
    be created, DatabaseConnectionError escapes the lifespan and the server
    never starts accepting connections.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Humans API %s starting up...", __version__)

    if app.state.store is None:
        app.state.store = HumanStore.from_settings(settings)
    store: HumanStore = app.state.store

    try:
        await store.bootstrap()
    except DatabaseConnectionError as e:
        logger.critical("Startup aborted: %s | Context: %s", e.message, e.context)
        await store.dispose()
        raise

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Humans API shutting down...")
    await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

    Handler hierarchy:
        RequestValidationError → 400 Bad Request (body not a JSON object with F_name/L_name)
        NotFoundError          → 404 Not Found
        DatabaseError          → 500 Internal Server Error
        HumansAPIError (base)  → 500 Internal Server Error

    Anything else is caught by UnhandledErrorMiddleware, which sits inside
    CORS so the 500 still carries the cross-origin headers.

    Responses never contain stack traces, SQL or driver messages; those are
    logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_decode_error(request: Request, exc: RequestValidationError):
        # FastAPI would answer 422; clients of this API expect 400
        logger.warning(
            "[%s] Invalid request body for %s %s: %s",
            request_id_var.get(""),
            request.method,
            request.url.path,
            exc.errors(),
        )
        return error_response(400, "validation_error", "Invalid request body")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(500, "server_error", exc.message)

    @app.exception_handler(HumansAPIError)
    async def handle_app_error(request: Request, exc: HumansAPIError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(500, "server_error", exc.message)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[HumanStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: HumanStore to serve from. When omitted, the lifespan builds
               one from settings at startup. Tests pass a SQLite-backed or
               mocked store here.

    Returns:
        Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="Humans API",
        description="Create, list, fetch, update and delete human records.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost)

    # Innermost: uncaught errors become JSON 500s before CORS headers are added
    app.add_middleware(UnhandledErrorMiddleware)

    # CORS — open to browser clients on any origin by default
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(humans.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run(
        "humans_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `humans_api.main:app` to be importable
app = create_app()
