"""
Health check routes
"""

from fastapi import APIRouter, Depends

from ..config import Settings
from ..utils.clock import utc_timestamp
from ..utils.dependencies import get_app_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check endpoint"""
    return {
        "status": "OK",
        "timestamp": utc_timestamp(),
        "service": settings.service_name,
        "version": settings.service_version
    }
