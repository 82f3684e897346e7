import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.domain.exceptions import ConfigurationException
from src.infrastructure.config.settings import get_settings
from src.infrastructure.crypto.algorithm_registry import AlgorithmRegistry
from src.presentation.api.dependencies import (get_algorithm_registry,
                                               get_hash_service)
from src.presentation.api.error_handlers import register_exception_handlers
from src.presentation.api.rate_limit import limiter
from src.presentation.api.v1.routes import hash as hash_routes
from src.presentation.middleware.correlation import CorrelationIDMiddleware
from src.presentation.middleware.security import SecurityHeadersMiddleware
from src.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    # Initialize logging
    setup_logging()

    # Build the service eagerly; a broken algorithm setup fails startup
    try:
        service = get_hash_service()
        logger.info(
            f"Hash service ready: default={service.default_algorithm}, "
            f"algorithms={','.join(info.name for info in service.list_supported_algorithms())}"
        )
    except ConfigurationException as e:
        logger.error(f"Hash service configuration failed: {e.message}")
        raise

    yield

    logger.info("Hash service shutting down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure rate limiter
app.state.limiter = limiter

# Secure error responses for every failure path
register_exception_handlers(app)

# Security middleware (order matters - applied in reverse)
# 1. Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# 2. Security headers
app.add_middleware(SecurityHeadersMiddleware)

# 3. CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origin_list,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
)

# Routers
app.include_router(hash_routes.router, prefix="/api/v1", tags=["hashing"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check(registry: AlgorithmRegistry = Depends(get_algorithm_registry)):
    """
    Health check endpoint for load balancers and monitoring.

    Validates:
    - API is responsive
    - At least one secure algorithm is available

    Returns:
    - 200 OK if healthy
    - 503 Service Unavailable if unhealthy
    """
    algorithms = registry.list_secure_algorithms()
    checks = {
        "api": True,  # If we got here, API is responding
        "algorithms": len(algorithms),
    }

    if algorithms:
        return {"status": "healthy", "checks": checks}
    return JSONResponse(status_code=503, content={"status": "unhealthy", "checks": checks})
