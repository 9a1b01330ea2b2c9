"""Health check endpoint."""

import datetime as dt
from typing import Any

from fastapi import APIRouter

from api import __version__

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict[str, Any]:
    """Report service liveness and version."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": dt.datetime.now(dt.UTC).isoformat(),
    }
