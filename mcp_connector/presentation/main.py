"""
FastAPI Application Entry Point.

This is the main entry point for the MCP Connector API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mcp_connector.infrastructure.config.logging_config import configure_logging
from mcp_connector.infrastructure.config.settings import get_settings
from mcp_connector.presentation.api.dependencies import close_repositories
from mcp_connector.presentation.api.routers import connection_router, server_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting MCP Connector on %s:%s", settings.host, settings.port)
    logger.info("Proxy host: %s", settings.proxy_host)

    yield

    logger.info("Shutting down MCP Connector")
    await close_repositories()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="MCP Connector",
        description="Connection lifecycle and tool proxy for MCP servers",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.include_router(connection_router)
    app.include_router(server_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "MCP Connector",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "mcp_connector.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
