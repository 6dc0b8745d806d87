"""
API router.
"""
from fastapi import APIRouter

from mood_garden.api.endpoints import analytics, entries, health, moods

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(moods.router, prefix="/moods", tags=["moods"])
api_router.include_router(entries.router, prefix="/users", tags=["entries"])
api_router.include_router(analytics.router, prefix="/users", tags=["analytics"])
