"""
Main FastAPI application for Bookshelf API
"""

from contextlib import asynccontextmanager

import strawberry
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database.connection import check_database_connection
from ..database.gateway import StorageGateway
from ..graphql.schema import build_schema, create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(
    store: StorageGateway | None = None, schema: strawberry.Schema | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    The storage gateway and schema are built once here and handed to the
    GraphQL router explicitly. A gateway passed in by the caller is not
    disposed on shutdown.
    """
    owns_store = store is None
    store = store or StorageGateway.from_url()
    schema = schema or build_schema()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Bookshelf API...")
        ok, error = await check_database_connection(store.engine)
        if ok:
            logger.info("Database connection verified")
        else:
            logger.error("Database connection check failed", error=error)
            if settings.environment.lower() in ("production", "prod"):
                raise RuntimeError(f"Database unavailable: {error}")

        yield

        logger.info("Shutting down Bookshelf API...")
        if owns_store:
            await store.dispose()

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over users, books and content documents",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store
    app.state.schema = schema

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

    # Validate schema at startup to catch unresolved lazy type references early
    logger.info("Validating GraphQL schema...")
    validate_schema(schema)
    graphql_router = create_graphql_router(schema, store, graphiql=settings.graphiql)
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app
