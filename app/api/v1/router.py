"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import dashboard, exercises, sets, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercises"]
)
api_router.include_router(
    sets.router, prefix="/sets", tags=["Workout sets"]
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"]
)
