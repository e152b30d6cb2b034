"""Fetch lifecycle of one paginated resource table."""

import itertools
import logging
from typing import Optional

from admin_console.core.errors import describe_error
from admin_console.models.page import Page, PagerSnapshot
from admin_console.models.query_state import QueryState, last_page_index
from admin_console.models.resources import ResourceDefinition
from admin_console.services.resource.base import PageParams, ResourceClient

logger = logging.getLogger(__name__)


class ResourcePager:
    """Keeps exactly one authoritative page for a resource.

    Every fetch gets a strictly increasing sequence number when it is
    issued. A response (success or failure) is only applied when it
    belongs to the most recently issued fetch; responses of superseded
    fetches are dropped, so a slow early request can never overwrite a
    faster later one. Errors never escape ``fetch``: they are recorded on
    ``error`` and the previous items are kept.
    """

    def __init__(self, resource: ResourceDefinition, client: ResourceClient) -> None:
        self.resource = resource
        self.client = client
        self._sequence = itertools.count(1)
        self._latest = 0
        self._page: Page = Page()
        self._query: Optional[QueryState] = None
        self.loading = False
        self.error: Optional[str] = None

    @property
    def page(self) -> Page:
        return self._page

    @property
    def query(self) -> Optional[QueryState]:
        """The query the current page was fetched for."""
        return self._query

    @property
    def latest_sequence(self) -> int:
        return self._latest

    @property
    def snapshot(self) -> PagerSnapshot:
        return PagerSnapshot(query=self._query, page=self._page, loading=self.loading, error=self.error)

    async def fetch(self, query: QueryState) -> Optional[PagerSnapshot]:
        """Fetch the page described by ``query``.

        Returns the applied snapshot, whose ``query`` may carry a clamped
        page index, or ``None`` when the response was superseded by a later
        fetch.
        """
        return await self._fetch(query, correcting=False)

    async def _fetch(self, query: QueryState, correcting: bool) -> Optional[PagerSnapshot]:
        sequence = next(self._sequence)
        self._latest = sequence
        self.loading = True
        self.error = None

        try:
            result = await self.client.fetch_page(self.resource, PageParams.from_query(query))
        except Exception as e:
            if sequence != self._latest:
                logger.debug(f"Discarding stale {self.resource.name} error #{sequence}: {e}")
                return None
            self.error = describe_error(e)
            self.loading = False
            self._query = query
            logger.warning(f"Fetch #{sequence} of {self.resource.name} failed: {self.error}")
            return self.snapshot

        if sequence != self._latest:
            logger.debug(
                f"Discarding stale {self.resource.name} response #{sequence} (latest is #{self._latest})"
            )
            return None

        self._page = Page(items=result.items, total_count=result.total_count, requested_at=sequence)
        self._query = query
        self.loading = False
        self.error = None

        # An empty result set still has page 0
        last_index = last_page_index(self._page.total_count, query.page_size)
        if not correcting and query.page_index > last_index:
            clamped = query.set_page(last_index)
            logger.info(
                f"Page {query.page_index} of {self.resource.name} is out of range, clamping to {clamped.page_index}"
            )
            return await self._fetch(clamped, correcting=True)

        return self.snapshot
