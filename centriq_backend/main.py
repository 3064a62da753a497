"""
Centriq Dashboard Backend - FastAPI Application
Main entry point with all routes configured.
"""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from centriq_backend import __version__
from centriq_backend.config import settings
from centriq_backend.core.cache import ResponseCache
from centriq_backend.core.exceptions import DashboardException, UpstreamError

# Import all API routers
from centriq_backend.api import campaigns, clients, feed, reports, system
from centriq_backend.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    app.state.cache = ResponseCache()
    app.state.http_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
    logger.info(f"Upstream API at {settings.API_BASE_URL}, reports at {settings.REPORTS_API_URL}")
    yield
    # Shutdown
    await app.state.http_client.aclose()


app = FastAPI(
    title="Centriq Dashboard API",
    description="Campaign dashboard, job stats and feed onboarding",
    version=__version__,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.DEV_MODE else [settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DashboardException)
async def dashboard_exception_handler(request: Request, exc: DashboardException):
    if isinstance(exc, UpstreamError):
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include all routers
app.include_router(campaigns.router)
app.include_router(clients.router)
app.include_router(reports.router)
app.include_router(feed.router)
app.include_router(system.router)  # Cache maintenance


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": "Centriq Dashboard API is running",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Detailed health check."""
    return HealthResponse(version=__version__, cached_responses=len(request.app.state.cache))
