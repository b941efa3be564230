"""
Main FastAPI application for the Star Wars GraphQL API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..data.repository import CharacterRepository
from ..graphql.errors import InvalidVariablesError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Star Wars GraphQL API...",
        characters=len(app.state.character_repository),
        max_query_depth=settings.max_query_depth,
        max_query_complexity=settings.max_query_complexity,
    )

    yield

    logger.info("Shutting down Star Wars GraphQL API...")


async def invalid_variables_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Rejected malformed variables", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"errors": [{"message": str(exc)}]})


def create_app(repository: CharacterRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Star Wars GraphQL API",
        description="GraphQL query endpoint over the Star Wars characters graph",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # The dataset is immutable and shared by every request
    app.state.character_repository = repository or CharacterRepository()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidVariablesError, invalid_variables_handler)

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import validate_schema

        # Fail fast: the server should not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema()
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    from .endpoints import gql, pages

    app.include_router(pages.router, tags=["Pages"])
    app.include_router(gql.router, tags=["GraphQL"])
    logger.info("GraphQL endpoint initialized successfully", endpoint="/gql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "starwars.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
