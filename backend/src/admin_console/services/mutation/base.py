"""Abstract base class for row mutation clients."""

from abc import ABC, abstractmethod
from typing import Any


class MutationClient(ABC):
    """Abstract base class for clients that change a record's blocked state."""

    @abstractmethod
    async def set_blocked_state(self, record_id: Any, blocked: bool) -> None:
        """Block (``blocked=True``) or unblock a user record.

        Raises:
            MutationError: If the remote call failed.
        """
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None


def action_name(blocked: bool) -> str:
    """Name of the action that moves a record to ``blocked``."""
    return "block" if blocked else "unblock"
