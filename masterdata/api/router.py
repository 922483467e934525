"""
Main API router
"""
from fastapi import APIRouter

from masterdata.api.v1 import (
    health,
    version,
    employees,
    departments,
    locations,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(employees.router, tags=["employee"])
api_router.include_router(departments.router, tags=["department"])
api_router.include_router(locations.router, tags=["location"])
