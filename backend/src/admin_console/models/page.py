"""Page models returned by resource clients and held by the pager."""

from typing import Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from admin_console.models.query_state import QueryState, page_count

T = TypeVar("T")


class PageResult(BaseModel, Generic[T]):
    """One page of items as returned by a resource client."""

    items: Tuple[T, ...] = ()
    total_count: int = Field(default=0, ge=0)


class Page(BaseModel, Generic[T]):
    """Authoritative page snapshot.

    Replaced as a whole on every applied fetch; ``requested_at`` is the
    sequence number of the fetch that produced it (0 before the first one).
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[T, ...] = ()
    total_count: int = Field(default=0, ge=0)
    requested_at: int = 0

    def page_count(self, page_size: int) -> int:
        """Number of pages at ``page_size``."""
        return page_count(self.total_count, page_size)


class PagerSnapshot(BaseModel):
    """Everything a view needs from the pager at one point in time."""

    model_config = ConfigDict(frozen=True)

    query: Optional[QueryState] = None
    page: Page = Field(default_factory=Page)
    loading: bool = False
    error: Optional[str] = None
