"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from poloclub.api import (
    attendance_router,
    auth_router,
    horses_router,
    players_router,
    practices_router,
)
from poloclub.api.errors import register_exception_handlers
from poloclub.config import get_settings
from poloclub.database import init_db
from poloclub.logger import setup_logger

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    await init_db()
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Polo club horse workload and practice planning service",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(auth_router, prefix="/api")
app.include_router(horses_router, prefix="/api")
app.include_router(players_router, prefix="/api")
app.include_router(practices_router, prefix="/api")
app.include_router(attendance_router, prefix="/api")
