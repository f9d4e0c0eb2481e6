"""
Main FastAPI application for Bookshelf backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import Collection, DataStore, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: DataStore = app.state.store
    logger.info(
        "Starting Bookshelf API...",
        authors=store.count(Collection.AUTHOR),
        books=store.count(Collection.BOOK),
    )

    yield

    logger.info("Shutting down Bookshelf API...")


def create_app(store: DataStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Data store served by the GraphQL endpoint. A fresh in-memory
            store (seeded per ``settings.seed_data``) is created if omitted.
    """
    if store is None:
        store = create_store()

    app = FastAPI(
        title="Bookshelf API",
        description="Authors and books over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast rather than serve a schema with unresolved lazy types
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
