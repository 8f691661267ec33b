"""FastAPI server exposing the inventory GraphQL API."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .schema import build_inventory_schema, execute_operation
from ..store.catalog import CatalogStore
from ..utils.config import get_config
from ..utils.logger import get_server_logger, get_error_logger

SERVICE_NAME = "Stockboard Inventory API"
VERSION = "1.0.0"


class GraphQLRequest(BaseModel):
    """Standard GraphQL-over-HTTP request body."""

    query: str
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(default=None, alias="operationName")


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """
    Create the API application.

    Args:
        store: Catalog to serve; a freshly seeded one when omitted

    Returns:
        Configured FastAPI app. The store is available as ``app.state.store``.
    """
    config = get_config()
    logger = get_server_logger()
    error_logger = get_error_logger()

    store = store or CatalogStore()
    schema = build_inventory_schema(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info(f"{SERVICE_NAME} Starting")
        logger.info("=" * 60)
        logger.info(f"Environment:   {config.env.environment}")
        logger.info(f"Port:          {config.env.port}")
        logger.info(f"GraphQL path:  {config.server.graphql_path}")
        logger.info(f"Products:      {len(store.list_products())}")
        logger.info(f"Warehouses:    {len(store.list_warehouses())}")
        logger.info("=" * 60)
        yield
        logger.info("Server shut down.")

    app = FastAPI(
        title=SERVICE_NAME,
        description="Mock GraphQL API for the inventory monitoring dashboard",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.schema = schema

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "graphql": config.server.graphql_path,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": config.env.environment
        }

    # Sync handler: runs in the threadpool, the store serialises writers.
    @app.post(config.server.graphql_path)
    def graphql_endpoint(payload: GraphQLRequest):
        """Execute a GraphQL query or mutation."""
        result = execute_operation(schema, payload.query, payload.variables, payload.operation_name)

        for error in result.errors or []:
            logger.warning(f"GraphQL error: {error.message}")

        # Parse and validation failures produce no data at all.
        status_code = 400 if result.data is None and result.errors else 200
        return JSONResponse(status_code=status_code, content=result.formatted)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Custom HTTP exception handler."""
        logger.warning(f"HTTP {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.detail,
                "status_code": exc.status_code
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """General exception handler for unexpected errors."""
        error_logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc) if not config.is_production else "An error occurred"
            }
        )

    return app


def run(host: Optional[str] = None, port: Optional[int] = None, reload: Optional[bool] = None):
    """Serve the API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "stockboard.api.server:create_app",
        factory=True,
        host=host or config.env.host,
        port=port or config.env.port,
        reload=(not config.is_production) if reload is None else reload
    )
