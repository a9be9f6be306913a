"""Health check endpoint — always answers, reports database reachability."""

from fastapi import APIRouter

from newsroom.config import get_settings
from newsroom.infrastructure.database.session import ping_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    database_ok = await ping_database()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "up" if database_ok else "down",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
