"""Block / unblock mutation of a single table row."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional

from admin_console.core.errors import MutationError, describe_error
from admin_console.models.mutation import MutationPhase, MutationResult
from admin_console.models.records import BlockableRecord
from admin_console.services.mutation.base import MutationClient, action_name
from admin_console.services.notification.base import Notifier
from admin_console.services.table.resource_pager import ResourcePager
from admin_console.services.table.row_action_tracker import RowActionTracker

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[], Awaitable[Any]]


class MutationCoordinator:
    """Runs one row's blocked-state toggle and reconciles the table afterwards.

    Per call: ``IDLE -> BUSY -> SUCCEEDED -> REFRESHING -> IDLE`` or
    ``IDLE -> BUSY -> FAILED -> IDLE``. The row stays busy until the
    refresh after a success has been issued, and is released on every exit
    path. The page itself is never edited locally: the new blocked state
    only shows up once the refresh has re-read it from the server.
    """

    def __init__(
        self,
        pager: ResourcePager,
        tracker: RowActionTracker,
        client: MutationClient,
        notifier: Notifier,
        refresh: RefreshCallback,
        settle_delay: float = 1.0,
    ) -> None:
        self.pager = pager
        self.tracker = tracker
        self.client = client
        self.notifier = notifier
        self.refresh = refresh
        self.settle_delay = settle_delay
        self._phases: Dict[Hashable, MutationPhase] = {}

    def phase(self, record_id: Hashable) -> MutationPhase:
        return self._phases.get(record_id, MutationPhase.IDLE)

    def _find_record(self, record_id: Any) -> BlockableRecord:
        resource = self.pager.resource
        if not resource.blockable:
            raise MutationError(record_id, "toggle", f"{resource.name} cannot be blocked")
        for record in self.pager.page.items:
            if record.key == record_id or str(record.key) == str(record_id):
                return record
        raise MutationError(record_id, "toggle", f"{resource.label} {record_id} is not on the current page")

    async def toggle(self, record_id: Hashable) -> MutationResult:
        """Flip the blocked state of ``record_id`` as last read from the server."""
        if self.tracker.is_busy(record_id):
            logger.info(f"Ignoring toggle of {record_id}: a change is already in flight")
            return MutationResult.failure(
                record_id, "a change is already in progress for this row", rejected=True
            )

        self.tracker.begin(record_id)
        self._phases[record_id] = MutationPhase.BUSY
        action: Optional[str] = None
        label = self.pager.resource.label
        try:
            try:
                record = self._find_record(record_id)
                target = not record.is_blocked
                action = action_name(target)
                logger.info(f"Starting {action} of {label} {record_id} (user {record.mutation_id})")
                await self.client.set_blocked_state(record.mutation_id, target)
            except Exception as e:
                self._phases[record_id] = MutationPhase.FAILED
                reason = describe_error(e)
                self.notifier.error(f"Failed to {action or 'update'} {label} {record_id}: {reason}")
                return MutationResult.failure(record_id, reason, action=action)

            self._phases[record_id] = MutationPhase.SUCCEEDED
            self.notifier.success(f"{label.capitalize()} {record.name or record_id} {action}ed")

            # The remote side is eventually consistent for this field
            self._phases[record_id] = MutationPhase.REFRESHING
            await asyncio.sleep(self.settle_delay)
            await self.refresh()
            return MutationResult.success(record_id, action)
        finally:
            self.tracker.end(record_id)
            self._phases.pop(record_id, None)
            logger.info(f"Finished toggle of {label} {record_id}")
