"""Dependencies for the application using FastAPI app state for singletons."""

import logging

from fastapi import Depends, Request

from admin_console.core.config import Settings, get_settings
from admin_console.services.notification.base import Notifier
from admin_console.services.table_registry import TableRegistry

logger = logging.getLogger(__name__)


def get_table_registry(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> TableRegistry:
    """Get the table registry from application state."""
    if not hasattr(request.app.state, "table_registry"):
        raise ValueError("Table registry not initialized in application state")

    return request.app.state.table_registry


def get_notifier(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Notifier:
    """Get the notifier from application state."""
    if not hasattr(request.app.state, "notifier"):
        raise ValueError("Notifier not initialized in application state")

    return request.app.state.notifier
