# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the TaxMate waitlist API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    TaxMateException,
    http_exception_handler,
    taxmate_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import health, waitlist

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration. Supabase and Resend clients are created
    lazily on first use.
    """
    logger.info(f"Starting TaxMate waitlist API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.email_enabled:
        logger.warning("RESEND_API_KEY not set - welcome emails are disabled")

    yield

    logger.info("Shutting down TaxMate waitlist API")


# Create FastAPI application
app = FastAPI(
    title="TaxMate Waitlist API",
    description="""
## TaxMate Waitlist

Collects early-access signups from the TaxMate landing page.

- **POST /api/waitlist** with `{"email": "...", "name": "...", "message": "..."}`
- The first signups get early-bird lifetime pricing
- A welcome email is sent when email is configured

```bash
curl -X POST http://localhost:8000/api/waitlist \\
  -H "Content-Type: application/json" \\
  -d '{"email": "you@example.com", "name": "Priya"}'
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Waitlist",
            "description": "Join the early-access waitlist",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - the landing page may be served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TaxMateException)
async def handle_taxmate_exception(request: Request, exc: TaxMateException):
    """Handle custom TaxMate exceptions."""
    return await taxmate_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Handle framework HTTP errors (404, unrouted 405)."""
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Waitlist signup
app.include_router(
    waitlist.router,
    prefix="/api/waitlist",
    tags=["Waitlist"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "TaxMate Waitlist API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
