"""
API directory, deployment test and model catalog routes
"""

from fastapi import APIRouter, Depends

from ..config import Settings
from ..models.catalog import MODEL_CATALOG
from ..utils.clock import utc_timestamp
from ..utils.dependencies import get_app_settings

router = APIRouter()

ENDPOINTS = {
    "health": "/health",
    "test": "/api/test",
    "models": "/api/models",
    "chat": "/api/chat",
}


@router.get("/api")
async def api_directory(settings: Settings = Depends(get_app_settings)):
    """List the available endpoints"""
    return {
        "message": f"Welcome to {settings.service_name}",
        "version": settings.service_version,
        "endpoints": dict(ENDPOINTS)
    }


@router.get("/api/test")
async def api_test(settings: Settings = Depends(get_app_settings)):
    """Connectivity check reporting the deployment mode"""
    return {
        "message": "Backend API is working!",
        "timestamp": utc_timestamp(),
        "environment": settings.node_env
    }


@router.get("/api/models")
async def list_models():
    """Static model catalog"""
    return {
        "models": [model.model_dump(mode="json") for model in MODEL_CATALOG]
    }
