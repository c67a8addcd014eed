"""
FastAPI Application - Catalog Service
Public product and hero catalog with admin-gated management
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import auth, health, hero, products
from app.clients.object_storage import S3ObjectStorage
from app.core.config import config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logger import logger
from app.core.telemetry import instrument_app
from app.db.mongodb import MongoConnectionManager
from app.middleware import CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup; MongoDB is connected by the first request that needs it
    logger.info(
        "Catalog Service started",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
            "storage_configured": app.state.object_storage.is_configured,
        }
    )

    yield

    # Shutdown
    logger.info("Shutting down Catalog Service...")
    app.state.connection_manager.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Catalog Service",
        description="Product and hero slide catalog with admin management",
        version=config.service_version,
        lifespan=lifespan
    )

    # Process-wide resources shared by every request
    app.state.connection_manager = MongoConnectionManager(config)
    app.state.object_storage = S3ObjectStorage(config)

    # Instrument app with OpenTelemetry for automatic tracing
    instrument_app(app)

    # Configure error handlers
    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(CorrelationIdMiddleware, header_name=config.correlation_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    prefix = config.api_prefix.rstrip("/")
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(products.router, prefix=f"{prefix}/products", tags=["products"])
    app.include_router(hero.router, prefix=f"{prefix}/hero", tags=["hero"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
