"""Abstract base class for resource clients."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from admin_console.models.page import PageResult
from admin_console.models.query_state import QueryState
from admin_console.models.records import AdminRecord
from admin_console.models.resources import ResourceDefinition


class PageParams(BaseModel):
    """Request parameters of one page fetch."""

    page_index: int = 0
    page_size: int = 10
    sort_field: Optional[str] = None
    sort_direction: Optional[str] = None
    search: Optional[str] = None
    filters: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_query(cls, query: QueryState) -> "PageParams":
        """Build request parameters; cleared filters are left out."""
        params = query.to_params()
        params["filters"] = {k: v for k, v in params["filters"].items() if v is not None}
        return cls(**params)


class ResourceClient(ABC):
    """Abstract base class for paginated resource clients."""

    @abstractmethod
    async def fetch_page(self, resource: ResourceDefinition, params: PageParams) -> PageResult:
        """Fetch one page of ``resource``.

        Raises:
            FetchError: If the request failed or the API answered with an error.
        """
        pass

    @abstractmethod
    async def fetch_one(self, resource: ResourceDefinition, record_id: Any) -> AdminRecord:
        """Fetch a single record by identifier.

        Raises:
            RecordNotFoundError: If the record does not exist.
            FetchError: If the request failed.
        """
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
