"""FastAPI application entry point"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.api.endpoints import analyze, event, checkout, metrics, health
from app.config import settings
from app.utils.logger import setup_logging
from app.exceptions import BurnoutBuddyException, ValidationException

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    - Startup: log configuration
    - Shutdown: nothing to release, documents are written per request
    """
    # Startup
    logger.info(f"Starting {settings.APP_NAME}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Data directory: {settings.DATA_DIR}")
    logger.info(f"Event log cap: {settings.EVENT_LOG_MAX_EVENTS}")
    if not settings.STRIPE_PAYMENT_LINK_URL:
        logger.warning("STRIPE_PAYMENT_LINK_URL is not set, checkout will fail")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Scripted burnout support replies with a growth metrics dashboard",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(analyze.router, prefix="/api", tags=["analyze"])
app.include_router(event.router, prefix="/api", tags=["events"])
app.include_router(checkout.router, prefix="/api", tags=["checkout"])
app.include_router(metrics.router, prefix="/api", tags=["admin"])


# Exception handlers
@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    """Handle request validation errors raised below the route layer"""
    logger.warning(f"Validation error: {str(exc)}")
    return JSONResponse(
        status_code=400,
        content={
            "error": exc.__class__.__name__,
            "detail": str(exc)
        }
    )


@app.exception_handler(BurnoutBuddyException)
async def service_exception_handler(request: Request, exc: BurnoutBuddyException):
    """Handle storage and configuration errors"""
    logger.error(f"Service exception: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "error": exc.__class__.__name__,
            "detail": str(exc)
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all other exceptions"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "InternalServerError",
            "detail": "An unexpected error occurred"
        }
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{settings.APP_NAME} API",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT,
        "docs": "/docs" if settings.DEBUG else "disabled"
    }


@app.get("/api/info")
async def api_info():
    """API information"""
    return {
        "app_name": settings.APP_NAME,
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "analyze": "/api/analyze",
            "event": "/api/event",
            "checkout": "/api/stripe/checkout",
            "metrics": "/api/admin/metrics",
            "health": "/health"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
