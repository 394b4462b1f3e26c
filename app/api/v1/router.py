"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import coaching, exercises

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    coaching.router, prefix="/coaching", tags=["Coaching"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercise library"]
)
