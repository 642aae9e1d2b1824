"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.api.v1.router import api_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Athlete training-load monitoring: ACWR series and daily risk alerts.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

logger.info("%s v%s (reporting timezone: %s)", settings.PROJECT_NAME, settings.VERSION,
            settings.REPORTING_TIMEZONE)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Workload Monitor API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "workload-monitor-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
