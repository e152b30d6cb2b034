"""API schemas for table operations."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from admin_console.models.mutation import MutationResult
from admin_console.models.query_state import SortDirection
from admin_console.services.notification.base import Notification
from admin_console.services.table.table_controller import TableSnapshot


class QueryUpdate(BaseModel):
    """Schema for a partial query update.

    Only the fields present in the request are applied; ``search: null``
    clears the search and a ``null`` filter value clears that filter.
    """

    page_index: Optional[int] = Field(default=None, ge=0)
    page_size: Optional[int] = Field(default=None, gt=0)
    sort_field: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
    search: Optional[str] = None
    filters: Dict[str, Any] = Field(default_factory=dict)


class QueryParamsResponse(BaseModel):
    """Schema for the controller-facing query parameters."""

    page_index: int
    page_size: int
    sort_field: Optional[str] = None
    sort_direction: Optional[str] = None
    search: Optional[str] = None
    filters: Dict[str, Any]
    generation: int


class TableResponse(BaseModel):
    """Schema for a table snapshot."""

    resource: str
    query: QueryParamsResponse
    items: List[Dict[str, Any]]
    total_count: int
    page_count: int
    loading: bool
    error: Optional[str] = None
    busy_ids: List[Any]
    filter_names: List[str] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: TableSnapshot) -> "TableResponse":
        return cls(
            resource=snapshot.resource,
            query=QueryParamsResponse(
                **snapshot.query.to_params(), generation=snapshot.query.generation
            ),
            items=[item.model_dump(mode="json", by_alias=True) for item in snapshot.items],
            total_count=snapshot.total_count,
            page_count=snapshot.page_count,
            loading=snapshot.loading,
            error=snapshot.error,
            busy_ids=sorted(snapshot.busy_ids, key=str),
            filter_names=list(snapshot.filter_names),
        )


class MutationResponse(BaseModel):
    """Schema for the outcome of a row action."""

    record_id: Any
    succeeded: bool
    action: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def from_result(cls, result: MutationResult) -> "MutationResponse":
        return cls(
            record_id=result.record_id,
            succeeded=result.succeeded,
            action=result.action,
            reason=result.reason,
        )


class NotificationListResponse(BaseModel):
    """Schema for listing pending notifications."""

    items: List[Notification]


class RecordResponse(BaseModel):
    """Schema for a single record."""

    resource: str
    record: Dict[str, Any]
