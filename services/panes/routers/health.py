"""
Panes — Health Check Router
"""
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from panes import __version__

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "service": "panes-ui",
        "status": "healthy",
        "version": __version__,
        "uptime_s": round(time.time() - _start_time, 1),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
