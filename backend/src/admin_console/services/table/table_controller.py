"""Controller binding query state, pager and row actions for one table view."""

import logging
from typing import Any, Awaitable, Callable, FrozenSet, Hashable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from admin_console.core.errors import FetchError
from admin_console.models.mutation import MutationResult
from admin_console.models.query_state import QueryState, SortDirection
from admin_console.models.records import AdminRecord
from admin_console.models.resources import ResourceDefinition
from admin_console.services.mutation.base import MutationClient
from admin_console.services.notification.base import Notifier
from admin_console.services.resource.base import ResourceClient
from admin_console.services.table.mutation_coordinator import MutationCoordinator
from admin_console.services.table.resource_pager import ResourcePager
from admin_console.services.table.row_action_tracker import RowActionTracker

logger = logging.getLogger(__name__)

QueryStateListener = Callable[[QueryState], Awaitable[None]]


class TableSnapshot(BaseModel):
    """Consistent view of a table at one point in time."""

    model_config = ConfigDict(frozen=True)

    resource: str
    query: QueryState
    items: Tuple[Any, ...]
    total_count: int
    page_count: int
    loading: bool
    error: Optional[str] = None
    busy_ids: FrozenSet[Hashable] = frozenset()
    filter_names: Tuple[str, ...] = ()


class TableController:
    """Owns the query state and busy set of one table view.

    Query changes are pushed to listeners registered with ``subscribe``;
    the controller's own re-fetch is always the first of them. A change
    that produces an equal query state is not propagated.
    """

    def __init__(
        self,
        resource: ResourceDefinition,
        resource_client: ResourceClient,
        mutation_client: MutationClient,
        notifier: Notifier,
        page_size: int = 10,
        settle_delay: float = 1.0,
    ) -> None:
        self.resource = resource
        self.notifier = notifier
        self.pager = ResourcePager(resource, resource_client)
        self.tracker = RowActionTracker()
        self.coordinator = MutationCoordinator(
            pager=self.pager,
            tracker=self.tracker,
            client=mutation_client,
            notifier=notifier,
            refresh=self.force_refresh,
            settle_delay=settle_delay,
        )
        self._resource_client = resource_client
        self._query = QueryState(page_size=page_size)
        self._listeners: List[QueryStateListener] = [self._on_query_state_change]
        self.mounted = False

    @property
    def query(self) -> QueryState:
        return self._query

    def subscribe(self, listener: QueryStateListener) -> None:
        """Call ``listener`` with every new query state."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: QueryStateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def mount(self) -> TableSnapshot:
        """Load the first page."""
        logger.info(f"Mounting {self.resource.name} table")
        self.mounted = True
        await self._on_query_state_change(self._query)
        return self.snapshot()

    def unmount(self) -> None:
        """Discard listeners and busy rows; the controller is not reused."""
        logger.info(f"Unmounting {self.resource.name} table")
        self.mounted = False
        self._listeners = []
        self.tracker.clear()

    async def _apply(self, query: QueryState) -> TableSnapshot:
        if query == self._query:
            return self.snapshot()
        self._query = query
        await self._publish(query)
        return self.snapshot()

    async def _publish(self, query: QueryState, fetched: bool = False) -> None:
        """Call the listeners with ``query`` while it is still the current state.

        A state replaced during delivery (clamped by the pager, or superseded
        by a newer change) is not passed on; its replacement is published
        instead.
        """
        for listener in list(self._listeners):
            if self._query != query:
                break
            if fetched and listener == self._on_query_state_change:
                continue
            await listener(query)

    async def _on_query_state_change(self, query: QueryState) -> None:
        snapshot = await self.pager.fetch(query)
        if snapshot is None:
            return
        if snapshot.error:
            self.notifier.error(f"Failed to load {self.resource.name}: {snapshot.error}")
        elif snapshot.query is not None and snapshot.query != query and self._query == query:
            # The pager clamped the page index and already fetched it
            self._query = snapshot.query
            await self._publish(snapshot.query, fetched=True)

    async def set_page(self, index: int) -> TableSnapshot:
        return await self._apply(self._query.set_page(index))

    @property
    def known_total(self) -> Optional[int]:
        """Total count of the last applied page, or None before the first one."""
        return self.pager.page.total_count if self.pager.page.requested_at else None

    async def set_query(self, query: QueryState) -> TableSnapshot:
        """Replace the query state in one step; at most one fetch is issued."""
        return await self._apply(query)

    async def set_page_size(self, size: int) -> TableSnapshot:
        return await self._apply(self._query.set_page_size(size, self.known_total))

    async def set_search(self, text: Optional[str]) -> TableSnapshot:
        return await self._apply(self._query.set_search(text))

    async def set_filter(self, key: str, value: Any) -> TableSnapshot:
        return await self._apply(self._query.set_filter(key, value))

    async def set_sort(
        self, field: Optional[str], direction: SortDirection = SortDirection.ASC
    ) -> TableSnapshot:
        return await self._apply(self._query.set_sort(field, direction))

    async def reset_filters(self) -> TableSnapshot:
        return await self._apply(self._query.reset_filters())

    async def force_refresh(self) -> TableSnapshot:
        """Re-read the current view from the server."""
        return await self._apply(self._query.force_refresh())

    async def toggle_blocked(self, record_id: Hashable) -> MutationResult:
        return await self.coordinator.toggle(record_id)

    def is_busy(self, record_id: Hashable) -> bool:
        return self.tracker.is_busy(record_id)

    async def fetch_record(self, record_id: Any) -> AdminRecord:
        """Load a single record of this table's resource."""
        try:
            return await self._resource_client.fetch_one(self.resource, record_id)
        except FetchError as e:
            self.notifier.error(str(e))
            raise

    def snapshot(self) -> TableSnapshot:
        page = self.pager.page
        return TableSnapshot(
            resource=self.resource.name,
            query=self._query,
            items=page.items,
            total_count=page.total_count,
            page_count=page.page_count(self._query.page_size),
            loading=self.pager.loading,
            error=self.pager.error,
            busy_ids=self.tracker.busy_ids,
            filter_names=self.resource.filter_names,
        )
