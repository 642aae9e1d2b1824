"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    training.router,
    prefix="/athletes",
    tags=["Training records"],
)
api_router.include_router(
    analytics.router, tags=["Analytics"]
)
