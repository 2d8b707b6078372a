"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, solarchat.api, solarchat.observability, solarchat.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solarchat import __version__
from solarchat.api import api_router
from solarchat.api.routers.error_handling import register_exception_handlers
from solarchat.boundary.db.connection import dispose_engine
from solarchat.boundary.db.create_tables import create_all_tables
from solarchat.boundary.llm import CompletionClient
from solarchat.configs import get_settings
from solarchat.observability.logger import configure_logging
from solarchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup configures logging, optionally creates tables, and builds the
    completion client once so a missing API key stops the process before
    it serves traffic. Shutdown disposes the database engine.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    try:
        if settings.database.create_tables_on_startup:
            await create_all_tables()

        # Fail fast on missing credentials
        app.state.completion_client = CompletionClient.from_settings(settings)
        logger.info("Application startup complete: all resources initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    # Shutdown
    await dispose_engine()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Customer chat assistant for a solar installation company, "
        "with keyword retrieval over a managed document library",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "solarchat.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
