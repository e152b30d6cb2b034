"""Busy set of rows with a mutation in flight."""

import logging
from typing import Any, FrozenSet, Hashable, Set

logger = logging.getLogger(__name__)


class RowActionTracker:
    """Tracks which record identifiers have a pending mutation.

    Only the affected rows are reported busy; the table's own loading flag
    is independent. ``begin`` and ``end`` are idempotent.
    """

    def __init__(self) -> None:
        self._busy: Set[Hashable] = set()

    def begin(self, record_id: Hashable) -> bool:
        """Mark ``record_id`` busy. Returns False if it already was."""
        if record_id in self._busy:
            return False
        self._busy.add(record_id)
        return True

    def end(self, record_id: Hashable) -> None:
        """Release ``record_id``."""
        self._busy.discard(record_id)

    def is_busy(self, record_id: Any) -> bool:
        return record_id in self._busy

    def clear(self) -> None:
        if self._busy:
            logger.warning(f"Releasing {len(self._busy)} busy rows")
        self._busy.clear()

    @property
    def busy_ids(self) -> FrozenSet[Hashable]:
        return frozenset(self._busy)

    def __len__(self) -> int:
        return len(self._busy)

    def __contains__(self, record_id: Any) -> bool:
        return record_id in self._busy
