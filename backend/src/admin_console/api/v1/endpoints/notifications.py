"""Notification endpoints for the API."""

from fastapi import APIRouter, Depends

from admin_console.core.dependencies import get_notifier
from admin_console.schemas.table_api import NotificationListResponse
from admin_console.services.notification.base import Notifier

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def drain_notifications(
    notifier: Notifier = Depends(get_notifier),
) -> NotificationListResponse:
    """Return the pending success and failure messages and clear them.

    Returns:
        NotificationListResponse: The pending notifications, oldest first.
    """
    return NotificationListResponse(items=notifier.drain())
