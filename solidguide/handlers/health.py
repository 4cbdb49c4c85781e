"""Health check endpoint handler."""
from datetime import datetime, timezone
from fastapi import APIRouter

from solidguide.handlers.guide import get_guide

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint that returns service status, the number of
    principles loaded and the current timestamp.

    Returns:
        dict: Health status, principle count and timestamp
    """
    return {
        "status": "healthy",
        "principles": len(get_guide().sections),
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    }
