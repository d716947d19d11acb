"""
Health Routes - Liveness check for the Kaizen API
"""
from fastapi import APIRouter

from kaizen import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report that the API is up, with its version"""
    return {"status": "ok", "message": "Kaizen API is alive", "version": __version__}
