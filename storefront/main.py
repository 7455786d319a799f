"""
FastAPI application entry point for the Storefront validation service.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import settings
from storefront.routes.health import router as health_router
from storefront.routes.schemas import router as schemas_router
from storefront.schemas.registry import registry

# Configure logging once for the whole package; modules use logging.getLogger(__name__).
# Never log request bodies, field values or addresses: only schema names,
# sources, counts and violation field paths.
logging.basicConfig(
    level=settings.log_level_value,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    Environment-based configuration:
    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS env var
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        if settings.CORS_ALLOWED_ORIGINS:
            logger.info(
                f"CORS configured for production with {len(settings.CORS_ALLOWED_ORIGINS)} allowed origins"
            )
            return list(settings.CORS_ALLOWED_ORIGINS)

        # In production without explicit origins, allow none (strict)
        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
        )
        return []

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Storefront Validation API",
    description="Request schemas and validation gate for the storefront backend",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log FastAPI's own parameter validation errors and return them in the
    same envelope the schema gate uses.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: "
        f"{[error.get('loc') for error in exc.errors()]}"
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "details": [
                {
                    "field": ".".join(str(part) for part in error.get("loc", ())),
                    "message": error.get("msg", "invalid"),
                }
                for error in exc.errors()
            ]
        }
    )


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(schemas_router)

logger.info(f"FastAPI app initialized with {len(registry)} schemas")
