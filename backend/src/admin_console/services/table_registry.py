"""Registry of the mounted resource tables."""

import logging
from typing import Dict, Optional, Tuple

from admin_console.core.config import Settings
from admin_console.models.resources import get_resource
from admin_console.services.mutation.base import MutationClient
from admin_console.services.notification.base import Notifier
from admin_console.services.resource.base import ResourceClient
from admin_console.services.table.table_controller import TableController

logger = logging.getLogger(__name__)

DEFAULT_VIEW = "default"


class TableRegistry:
    """Holds one mounted controller per resource and view.

    A view id names one open table on the client side (a browser tab, say);
    separate views of the same resource never share a query state or busy set.
    """

    def __init__(
        self,
        resource_client: ResourceClient,
        mutation_client: MutationClient,
        notifier: Notifier,
        settings: Settings,
    ) -> None:
        self.resource_client = resource_client
        self.mutation_client = mutation_client
        self.notifier = notifier
        self.settings = settings
        self._tables: Dict[Tuple[str, str], TableController] = {}

    def get(self, name: str, view: str = DEFAULT_VIEW) -> Optional[TableController]:
        return self._tables.get((name, view))

    def create(self, name: str) -> TableController:
        """Create an unmounted controller for ``name``.

        Raises:
            UnknownResourceError: If ``name`` is not a known resource.
        """
        resource = get_resource(name)
        return TableController(
            resource=resource,
            resource_client=self.resource_client,
            mutation_client=self.mutation_client,
            notifier=self.notifier,
            page_size=self.settings.default_page_size,
            settle_delay=self.settings.refresh_settle_delay,
        )

    async def get_or_mount(self, name: str, view: str = DEFAULT_VIEW) -> TableController:
        """Return the mounted controller for ``name`` in ``view``, mounting it on first use."""
        controller = self._tables.get((name, view))
        if controller is None:
            controller = self.create(name)
            self._tables[(name, view)] = controller
            await controller.mount()
        return controller

    def unmount(self, name: str, view: str = DEFAULT_VIEW) -> bool:
        controller = self._tables.pop((name, view), None)
        if controller is None:
            return False
        controller.unmount()
        return True

    async def close(self) -> None:
        """Unmount every table and release the clients."""
        for name, view in list(self._tables):
            self.unmount(name, view)
        await self.resource_client.aclose()
        if self.mutation_client is not self.resource_client:
            await self.mutation_client.aclose()
        logger.info("Table registry closed")
