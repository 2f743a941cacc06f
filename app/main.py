"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import logging
from typing import Dict, Any

from app.config import settings
from app.infrastructure.db.database import build_repositories, create_client, ping
from app.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from app.infrastructure.web.routers import (
    agents,
    auth,
    houses,
    payments,
    rented_houses,
    testimonials,
    users,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Connects the shared MongoDB client on startup and closes it on shutdown.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    client = create_client(settings)
    app.state.repositories = build_repositories(client, settings.database_name)

    try:
        await ping(client)
    except Exception as e:
        logger.error(f"MongoDB ping failed: {str(e)}")

    yield

    logger.info("Shutting down application")
    await client.close()


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Add custom error handler middleware; added first so CORS wraps error responses
    app.add_middleware(ErrorHandlerMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Include routers
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(houses.router, prefix="/houses", tags=["Houses"])
    app.include_router(testimonials.router, prefix="/testimonials", tags=["Testimonials"])
    app.include_router(agents.router, prefix="/agents", tags=["Agents"])
    app.include_router(payments.intent_router, tags=["Payments"])
    app.include_router(payments.router, prefix="/payments", tags=["Payments"])
    app.include_router(rented_houses.router, prefix="/rentedhouses", tags=["Rented Houses"])

    # Root endpoint
    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Root endpoint."""
        return "Vhara Bari Is Running On Rent..."

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        return JSONResponse(
            status_code=404,
            content={
                "error": True,
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Vhara Bari Is Running On {settings.port}...")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
