"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from loadtracker.api.v1.endpoints import dashboard, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Training sessions"]
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"]
)
