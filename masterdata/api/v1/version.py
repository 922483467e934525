"""
Version and metadata endpoint
"""
from fastapi import APIRouter

from masterdata import __version__
from masterdata.api.v1.health import SERVICE_NAME
from masterdata.core.config import settings

router = APIRouter()


@router.get("/version")
async def get_version():
    """
    Get application version and metadata

    Returns:
        Service name, version and environment
    """
    return {
        "service": SERVICE_NAME,
        "version": settings.VERSION or __version__,
        "env": settings.APP_ENV,
    }
