"""
Main FastAPI application serving the Hello World plugin
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting plugin API...", plugin=settings.plugin_name, pid=os.getpid())
    yield
    logger.info("Shutting down plugin API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    from ..plugin import plugin

    app = FastAPI(
        title="Hello World Plugin API",
        description="Demonstration plugin answering GraphQL and REST operations",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("HELLO_PLUGIN_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            logger.info("Validating GraphQL schema...")
            validate_schema()

            app.include_router(create_graphql_router(), prefix="")
            logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            raise

    from .endpoints.plugin import create_router

    app.include_router(create_router(plugin), prefix="/api/plugin", tags=["Plugin"])

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hello_plugin.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
