"""Main module for the admin console API service."""

import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin_console.api.v1.api import api_router
from admin_console.core.config import Settings, get_settings
from admin_console.services.client_factory import ClientFactory
from admin_console.services.notification.logging_notifier import LoggingNotifier
from admin_console.services.table_registry import TableRegistry

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    redirect_slashes=False,  # Disable automatic redirects for trailing slashes
)

# Configure CORS with specific settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Include the API router
app.include_router(api_router, prefix=settings.api_v1_str)


def init_services(application: FastAPI, app_settings: Settings) -> None:
    """Create the clients, notifier and table registry on ``application.state``."""
    resource_client, mutation_client = ClientFactory.create_clients(app_settings)
    application.state.notifier = LoggingNotifier(history=app_settings.notification_history)
    application.state.table_registry = TableRegistry(
        resource_client=resource_client,
        mutation_client=mutation_client,
        notifier=application.state.notifier,
        settings=app_settings,
    )


@app.on_event("startup")
async def startup_event():
    """Initialize services once at application startup."""
    logger.info("Initializing application services...")
    try:
        init_services(app, settings)
        app.state.services_initialized = True
        logger.info("All application services initialized successfully")
    except Exception as e:
        logger.error(f"Error initializing services: {str(e)}")
        app.state.services_initialized = False


@app.on_event("shutdown")
async def shutdown_event():
    """Unmount every table and close the API clients."""
    registry = getattr(app.state, "table_registry", None)
    if registry is not None:
        await registry.close()


@app.get("/ping")
async def pong(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Ping the API to check if it's running."""
    return {
        "ping": "pong!",
        "environment": settings.environment,
        "testing": settings.testing,
        "client_provider": settings.client_provider,
    }
