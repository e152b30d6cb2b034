"""HTTP mutation client for the remote admin API."""

import logging
from typing import Any, Optional

import httpx

from admin_console.core.context import ApiContext
from admin_console.core.errors import MutationError, describe_error
from admin_console.services.mutation.base import MutationClient, action_name

logger = logging.getLogger(__name__)


class HttpMutationClient(MutationClient):
    """Blocks and unblocks users through the admin REST API."""

    def __init__(self, context: ApiContext, client: Optional[httpx.AsyncClient] = None) -> None:
        self.context = context
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = self.context.create_client()
        return self._client

    async def set_blocked_state(self, record_id: Any, blocked: bool) -> None:
        """POST to ``/Admin/block-user/{id}`` or ``/Admin/unblock-user/{id}``."""
        action = action_name(blocked)
        logger.info(f"Calling {action}-user API for userId: {record_id}")
        try:
            response = await self.client.post(f"/Admin/{action}-user/{record_id}")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to {action} user {record_id}: {e}")
            raise MutationError(record_id, action, describe_error(e)) from e

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
