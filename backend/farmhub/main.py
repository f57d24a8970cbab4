"""
FarmHub - FastAPI Backend
Main application entry point
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
import logging
import traceback

from farmhub.api.v1.endpoints import land_parcels, crops, inventory, tools, financial_records
from farmhub.api.v1.endpoints import notifications, profile
from farmhub.api.v1.endpoints import dashboard, integrations
from farmhub.core.config import settings
from farmhub.core.database import engine, warmup_pool, wait_for_warmup_complete

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "farmhub-api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Pre-create a couple of connections to cut cold start latency
    warmup_pool()
    yield
    try:
        wait_for_warmup_complete(timeout=1.0)
        logger.info("Closing database connection pool...")
        engine.dispose(close=True)
        logger.info("Database connection pool closed successfully")
    except SQLAlchemyError as e:
        logger.error(f"Error closing database connections: {e}")


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for FarmHub - farm management: land, crops, inventory, equipment and finances",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Compress responses larger than 1000 bytes
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.exception_handler(OperationalError)
async def database_error_handler(request: Request, exc: OperationalError):
    """Handle database connection errors with user-friendly messages"""
    error_msg = str(exc.orig) if hasattr(exc, "orig") else str(exc)

    # DNS resolution errors show up while the Supabase project is paused or in maintenance
    if "could not translate host name" in error_msg or "nodename nor servname provided" in error_msg:
        logger.error(f"Database DNS resolution error: {error_msg}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "detail": "Database connection error. The database hostname cannot be resolved. "
                          "The Supabase project may be paused or under maintenance.",
                "error_type": "database_connection_error",
                "suggestions": [
                    "Check that the Supabase project is active in the dashboard",
                    "Check https://status.supabase.com for ongoing maintenance",
                    "Verify DATABASE_URL in the .env file",
                    "Use the direct connection (port 5432), not the pooler",
                ],
            },
        )

    logger.error(f"Database operational error: {error_msg}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "detail": "Database connection error. The service may be temporarily unavailable.",
            "error_type": "database_error",
            "error": error_msg,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions with their traceback and return a generic 500"""
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}\n{tb}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error. Contact support if the problem persists."},
    )


app.include_router(land_parcels.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
app.include_router(inventory.router, prefix="/api/v1")
app.include_router(tools.router, prefix="/api/v1")
app.include_router(financial_records.router, prefix="/api/v1")
app.include_router(notifications.router, prefix="/api/v1")
app.include_router(profile.router, prefix="/api/v1")
app.include_router(dashboard.router, prefix="/api/v1")
app.include_router(integrations.router, prefix="/api/v1")


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "message": f"{settings.APP_NAME} API",
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Fast health check, no database round trip"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/health/detailed")
async def health_check_detailed():
    """Detailed health check with database connectivity test"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "database": "connected",
        }
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "service": SERVICE_NAME,
                "database": "disconnected",
                "error": str(e),
            },
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
