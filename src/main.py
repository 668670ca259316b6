"""
Box Label Service - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from src.config import settings
from src.logger import get_logger, configure_logging
from src.models.common import ErrorResponse

# Configure logging
configure_logging()
logger = get_logger(__name__)

SERVICE_NAME = "Box Label Service"
SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Box Label Service starting", extra={
        "environment": settings.environment,
        "log_level": settings.log_level
    })

    yield

    logger.info("Box Label Service shutting down")


app = FastAPI(
    title=SERVICE_NAME,
    description="Renders box labels with Code 128 barcodes and a QR summary",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development or not settings.allowed_origin else [settings.allowed_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the standard error shape."""
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning("Request validation failed", extra={
        "path": request.url.path,
        "error_count": len(errors)
    })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error_code="INVALID_REQUEST",
            message="Request body is invalid",
            details={"errors": errors}
        ).model_dump(mode="json")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.error("Unhandled exception", extra={
        "path": request.url.path,
        "method": request.method,
        "error": str(exc)
    }, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred",
            details={"error": str(exc)} if settings.is_development else {}
        ).model_dump(mode="json")
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": SERVICE_VERSION,
        "environment": settings.environment
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


from src.routes.label_render_routes import router as label_render_router

app.include_router(label_render_router, prefix="/api/v1", tags=["labels"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level
    )
