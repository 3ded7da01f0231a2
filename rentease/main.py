"""
RentEase API - Main Application
FastAPI application with CORS, error handling, middleware, and logging
"""
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import logging
from datetime import datetime, timezone
import traceback

from starlette.exceptions import HTTPException as StarletteHTTPException

from rentease.api.routes import (
    auth_router,
    users_router,
    properties_router,
    units_router,
    applications_router,
    leases_router,
    payments_router,
    maintenance_router,
    messages_router,
    dashboard_router,
)
from rentease.core.config import settings, get_cors_origins, is_development
from rentease.core.deps import get_services
from rentease.database import test_connection, init_db, close_db_connection


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.PROJECT_DESCRIPTION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)


# ==================== MIDDLEWARE ====================


# Compression: GZip responses
app.add_middleware(GZipMiddleware, minimum_size=1000)


# CORS: Cross-Origin Resource Sharing
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"],
    allow_headers=["*"],
    expose_headers=["Content-Length"],
    max_age=3600,
)


# ==================== ROUTERS ====================


api = settings.API_PREFIX
app.include_router(auth_router, prefix=f"{api}/auth", tags=["Authentication"])
app.include_router(users_router, prefix=f"{api}/users", tags=["Users"])
app.include_router(properties_router, prefix=f"{api}/properties", tags=["Properties"])
app.include_router(units_router, prefix=f"{api}/units", tags=["Units"])
app.include_router(applications_router, prefix=f"{api}/applications", tags=["Applications"])
app.include_router(leases_router, prefix=f"{api}/leases", tags=["Leases"])
app.include_router(payments_router, prefix=f"{api}/payments", tags=["Payments"])
app.include_router(maintenance_router, prefix=f"{api}/maintenance", tags=["Maintenance"])
app.include_router(messages_router, prefix=f"{api}/messages", tags=["Messages"])
app.include_router(dashboard_router, prefix=f"{api}/dashboard", tags=["Dashboard"])


# ==================== ERROR HANDLERS ====================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap HTTP errors (401, unknown routes) in the envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "data": None, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with the envelope shape"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "data": None,
            "message": "Validation error",
            "errors": jsonable_encoder(exc.errors()),
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

    # Don't expose internal errors in production
    error_message = str(exc) if settings.DEBUG else "Internal server error"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "data": None,
            "message": error_message,
            "timestamp": utc_timestamp(),
        }
    )


# ==================== REQUEST LOGGING ====================


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    # Skip logging for health checks
    if request.url.path == "/health":
        return await call_next(request)

    start_time = datetime.now(timezone.utc)
    client = request.client.host if request.client else "-"
    logger.info(f">> {request.method} {request.url.path} - {client}")

    try:
        response = await call_next(request)
        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(f"<< {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
        return response
    except Exception as e:
        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.error(f"[ERROR] {request.method} {request.url.path} - Error: {str(e)} ({duration:.2f}s)")
        raise


# ==================== HEALTH & STATUS ENDPOINTS ====================


@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint for monitoring"""
    if settings.uses_memory_store:
        return {"success": True, "status": "healthy", "store": "memory", "timestamp": utc_timestamp()}

    connection_ok = test_connection()
    return {
        "success": True,
        "status": "healthy" if connection_ok else "degraded",
        "store": "sql",
        "database": "connected" if connection_ok else "disconnected",
        "timestamp": utc_timestamp(),
    }


@app.get(f"{api}/version", tags=["System"])
async def get_version():
    """Get API version information"""
    return {
        "success": True,
        "api_version": settings.VERSION,
        "app_name": settings.PROJECT_NAME,
        "store_backend": settings.STORE_BACKEND,
    }


# ==================== STARTUP & SHUTDOWN ====================


@app.on_event("startup")
async def startup_event():
    """Run on application startup"""
    logger.info("="*70)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info("="*70)
    logger.info(f"Environment: {'Development' if is_development() else 'Production'}")
    logger.info(f"Store backend: {settings.STORE_BACKEND}")
    logger.info(f"Frontend URL: {settings.FRONTEND_URL}")

    if not settings.uses_memory_store:
        # Database problems leave the API running in degraded mode
        if not test_connection():
            logger.warning("[WARN] Database connection failed - continuing in degraded mode")
        if not init_db():
            logger.warning("[WARN] Database init returned False - tables may not exist")

    if settings.SEED_DEMO_DATA:
        from rentease.seed import seed_demo_data

        seed_demo_data(get_services())

    logger.info("[OK] Application startup complete!")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    logger.info("Shutting down application...")
    if not settings.uses_memory_store:
        close_db_connection()
    logger.info("Application shutdown complete")
