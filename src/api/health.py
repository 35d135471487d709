"""
Health check endpoint.
"""
from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["health"])

API_VERSION = "0.1.0"


@router.get("/health")
async def health_check() -> dict:
    """Service liveness probe."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }
