"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import assets, auth, contact, dashboard, help_docs, projects, sites, users
from src.api.errors import error_body
from src.config import get_settings
from src.database import init_db
from src.services.storage import get_storage_dir

logger = logging.getLogger(__name__)

settings = get_settings()

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    get_storage_dir()
    if settings.auto_create_tables:
        init_db()
    yield


app = FastAPI(
    title="PortfolioPro API",
    description="Build, theme, publish and export personal portfolio sites",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (including APIError) in the failure envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            str(exc.detail),
            getattr(exc, "error_code", None),
            getattr(exc, "details", None),
        ),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Request schema failures are client errors, reported as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Validation failed", "VALIDATION_ERROR", jsonable_encoder(exc.errors())
        ),
    )


@app.exception_handler(ValidationError)
async def model_validation_handler(request: Request, exc: ValidationError):
    """Payload validation inside handlers (partial updates, JSON asset bodies)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Validation failed",
            "VALIDATION_ERROR",
            jsonable_encoder(exc.errors(include_url=False, include_context=False)),
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", "INTERNAL_SERVER_ERROR"),
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(sites.router)
app.include_router(projects.router)
app.include_router(assets.router)
app.include_router(contact.router)
app.include_router(dashboard.router)
app.include_router(help_docs.router)

app.mount("/storage", StaticFiles(directory=settings.storage_dir, check_dir=False), name="storage")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment, "version": API_VERSION}
