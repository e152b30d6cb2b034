"""API for the admin console."""

from fastapi import APIRouter

from admin_console.api.v1.endpoints import notifications, resources, tables

api_router = APIRouter()
api_router.include_router(
    tables.router, prefix="/tables", tags=["tables"]
)
api_router.include_router(
    resources.router, prefix="/resources", tags=["resources"]
)
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)
