"""
Portfolio Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, route mounting, the static
       upload mount and lifecycle management in one place.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance holding its own PortfolioStore and FileService.
Who:   uvicorn (`uvicorn portfolio_api.main:app` or the `portfolio-backend`
       console script) and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                   FastAPI App                        │
    │                                                      │
    │  Middleware:  Request ID → Access Log → CORS         │
    │                                                      │
    │  Routes:                                             │
    │   /api/skills   /api/projects   /api/messages        │
    │   /health       /uploads/* (StaticFiles)             │
    │                                                      │
    │  app.state:   store (PortfolioStore)                 │
    │               file_service (FileService)             │
    │                                                      │
    │  Exception Handlers:                                 │
    │   SkillDeletionError → 500 {success: false, message} │
    │   DatabaseError / FileStorageError → 500 {error}     │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Probe the store; on failure log and keep serving (degraded)
    Shutdown:
    1. Dispose the engine (close the single connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from portfolio_api import __version__
from portfolio_api.config import Settings, settings as default_settings
from portfolio_api.database import create_engine
from portfolio_api.exceptions import DatabaseError, FileStorageError, SkillDeletionError
from portfolio_api.middleware.logging import RequestLoggingMiddleware
from portfolio_api.middleware.request_id import RequestIDMiddleware, request_id_var
from portfolio_api.routes import health, messages, projects, skills
from portfolio_api.services.file_service import FileService
from portfolio_api.store import PortfolioStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiomysql").setLevel(logging.WARNING)


def _is_connection_refused(exc: BaseException) -> bool:
    """Walk the exception chain (SQLAlchemy wraps driver errors) for ECONNREFUSED."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, ConnectionRefusedError):
            return True
        seen.add(id(current))
        current = getattr(current, "orig", None) or current.__cause__ or current.__context__
    return False


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup probes the store once. A failure is logged and startup goes on:
    the server still answers, and every store-backed request returns 500
    until the database becomes reachable.
    """
    app_settings: Settings = app.state.settings
    store: PortfolioStore = app.state.store

    setup_logging(app_settings.log_level)
    logger.info("Portfolio backend starting up...")
    logger.info("Upload directory: %s", app.state.file_service.upload_dir)

    try:
        await store.ping()
        logger.info("Connected to database")
    except Exception as e:
        logger.error("Error connecting to database: %s", str(e))
        if _is_connection_refused(e):
            logger.error(
                "Make sure the database server is running and the connection details are correct."
            )

    logger.info("Server running on port %d", app_settings.backend_port)

    yield

    logger.info("Portfolio backend shutting down...")
    await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to the JSON bodies the frontend understands.

    Handler hierarchy (most specific wins):
        SkillDeletionError → 500 {"success": false, "message": ...}
        DatabaseError      → 500 {"error": ...}
        FileStorageError   → 500 {"error": ...}
        Exception          → 500 {"error": "Internal server error"}

    Driver details stay in the server log; clients only see the
    operation-specific message.
    """

    @app.exception_handler(SkillDeletionError)
    async def handle_skill_deletion_error(request: Request, exc: SkillDeletionError):
        rid = request_id_var.get("")
        logger.error("[%s] Skill deletion failed: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        rid = request_id_var.get("")
        logger.error("[%s] File storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app from; defaults to the
                      process-wide settings. Tests pass their own.

    The engine is created here but not connected; the first connection is
    made by the startup probe or the first request.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Portfolio API",
        description="Skills, projects and contact messages for a personal portfolio site.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Shared Resources ──────────────────────────────────────────────────
    app.state.settings = app_settings
    app.state.store = PortfolioStore(create_engine(app_settings))
    # Creates the upload directory if absent
    app.state.file_service = FileService(
        app_settings.upload_dir, app_settings.upload_url_prefix
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(skills.router)
    app.include_router(projects.router)
    app.include_router(messages.router)
    app.include_router(health.router)

    # Uploaded images, 1:1 with the upload directory; content type from extension
    app.mount(
        app_settings.upload_url_prefix,
        StaticFiles(directory=str(app.state.file_service.upload_dir)),
        name="uploads",
    )

    return app


def run() -> None:
    """Console entry point: serve the module-level app on the configured port."""
    uvicorn.run(
        "portfolio_api.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `portfolio_api.main:app` to be importable
app = create_app()
