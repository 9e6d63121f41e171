"""Main FastAPI application for the flood watch service."""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flood_watch.api.endpoints import router as flood_router
from flood_watch.config import (
    HOST, PORT, DEBUG, REFRESH_INTERVAL_SECONDS, REFRESH_ON_STARTUP
)
from flood_watch.errors import FloodWatchError
from flood_watch.flood.aggregator import AggregationEngine
from flood_watch.flood.refresher import PeriodicRefresher
from flood_watch.logging_config import configure_logging

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


def create_app(engine: Optional[AggregationEngine] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        engine: Aggregation engine to serve (creates default on startup if None)

    Returns:
        Configured FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        refresher = None
        try:
            app.state.engine = engine or AggregationEngine()
            logger.info(f"Starting Flood Watch Service with {len(app.state.engine.registry)} locations")

            if REFRESH_ON_STARTUP:
                try:
                    await app.state.engine.refresh()
                except FloodWatchError as e:
                    logger.error(f"Initial refresh failed: {e}")

            if REFRESH_INTERVAL_SECONDS > 0:
                refresher = PeriodicRefresher(app.state.engine, REFRESH_INTERVAL_SECONDS)
                refresher.start()

            yield
        except Exception as e:
            logger.error(f"Startup error: {e}")
            logger.error(traceback.format_exc())
            raise
        finally:
            logger.info("Shutting down Flood Watch Service")
            if refresher is not None:
                await refresher.stop()
            if getattr(app.state, "engine", None) is not None:
                await app.state.engine.aclose()

    app = FastAPI(
        title="Flood Watch Service",
        description="REST API service that aggregates river discharge forecasts into flood risk snapshots",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(flood_router)

    @app.get("/", tags=["root"])
    async def api_info() -> dict:
        """API information endpoint.

        Returns:
            Basic service information
        """
        return {
            "message": "Flood Watch Service",
            "docs": "/docs",
            "redoc": "/redoc",
            "snapshot": "/flood/snapshot",
            "summary": "/flood/summary",
            "health": "/flood/health"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "flood_watch.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
