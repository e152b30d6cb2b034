"""Row mutation result and lifecycle models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class MutationPhase(str, Enum):
    """Lifecycle phase of one row mutation."""

    IDLE = "idle"
    BUSY = "busy"
    SUCCEEDED = "succeeded"
    REFRESHING = "refreshing"
    FAILED = "failed"


class MutationResult(BaseModel):
    """Outcome of a row mutation: success, or failure with a reason.

    ``rejected`` marks a failure that was refused before any remote call,
    because the row already had a mutation in flight.
    """

    model_config = ConfigDict(frozen=True)

    record_id: Any
    succeeded: bool
    action: Optional[str] = None
    reason: Optional[str] = None
    rejected: bool = False

    @classmethod
    def success(cls, record_id: Any, action: str) -> "MutationResult":
        return cls(record_id=record_id, succeeded=True, action=action)

    @classmethod
    def failure(
        cls, record_id: Any, reason: str, action: Optional[str] = None, rejected: bool = False
    ) -> "MutationResult":
        return cls(record_id=record_id, succeeded=False, action=action, reason=reason, rejected=rejected)
