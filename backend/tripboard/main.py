"""
FastAPI entrypoint for Tripboard backend application.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from tripboard.core.config import settings
from tripboard.core.errors import ErrorCode, TripboardError
from tripboard.core.logging_config import setup_logging
from tripboard.core.utils import format_error
from tripboard.api.router import api_router
from tripboard.db.session import SessionLocal, init_db
from tripboard.services.gallery_service import ensure_upload_dir
from tripboard.services.member_service import seed_members
import logging

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed sample members on an empty store."""
    init_db()
    db = SessionLocal()
    try:
        seed_members(db)
    finally:
        db.close()
    logger.info(f"{settings.APP_NAME} started, uploads in {settings.UPLOAD_DIR}")
    yield


app = FastAPI(
    title="Tripboard API",
    description="Shared backend for trip members and photo gallery",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Serve uploaded photos read-only under their generated storage names
app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=ensure_upload_dir()),
    name="uploads"
)

# Include API routes
app.include_router(api_router)


@app.exception_handler(TripboardError)
async def tripboard_error_handler(request: Request, exc: TripboardError):
    """Render domain errors as {message, code} with the matching status."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.http_status} {exc.code.value}: {exc.message}")
    return JSONResponse(
        status_code=exc.http_status,
        content=format_error(exc.message, exc.code.value)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and fields are client validation errors, not 422s."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', '')}"
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error(message, ErrorCode.VALIDATION_ERROR.value)
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: keep the {message, code} contract for unexpected failures."""
    logger.error(f"{request.method} {request.url.path} failed", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Internal error", ErrorCode.INTERNAL_ERROR.value)
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Tripboard API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
