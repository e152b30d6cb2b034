"""Query state model for one paginated resource table."""

import math
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortDirection(str, Enum):
    """Sort direction of a table column."""

    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Column sort specification."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC


def page_count(total_count: int, page_size: int) -> int:
    """Number of pages needed to show ``total_count`` rows."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(max(total_count, 0) / page_size)


def last_page_index(total_count: int, page_size: int) -> int:
    """Index of the last valid page; 0 for an empty result set."""
    return max(page_count(total_count, page_size) - 1, 0)


class QueryState(BaseModel):
    """Canonical query parameters of a table.

    Instances are frozen: every operation returns a new value, so a change
    can be detected with a plain equality check. ``generation`` takes part
    in that equality and is bumped by ``force_refresh`` to request a fetch
    even when nothing else changed.
    """

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)
    sort: Optional[SortSpec] = None
    search: Optional[str] = None
    filters: Dict[str, Any] = Field(default_factory=dict)
    generation: int = Field(default=0, ge=0)

    @field_validator("search")
    @classmethod
    def normalize_search(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("filters")
    @classmethod
    def drop_cleared_filters(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        return {key: item for key, item in value.items() if item is not None}

    def _replace(self, **changes: Any) -> "QueryState":
        # Re-validate so normalization rules also apply to the new value
        return QueryState.model_validate({**self.model_dump(), **changes})

    def set_page(self, index: int) -> "QueryState":
        """Move to another page."""
        return self._replace(page_index=max(index, 0))

    def set_page_size(self, size: int, total_count: Optional[int] = None) -> "QueryState":
        """Change the page size.

        With a known ``total_count`` the current page index is clamped to the
        last page that exists at the new size, otherwise it goes back to 0.
        """
        if total_count is None:
            return self._replace(page_size=size, page_index=0)
        index = min(self.page_index, last_page_index(total_count, size))
        return self._replace(page_size=size, page_index=index)

    def set_search(self, text: Optional[str]) -> "QueryState":
        """Set the free-text search and go back to the first page."""
        return self._replace(search=text, page_index=0)

    def set_filter(self, key: str, value: Any) -> "QueryState":
        """Set one filter, or clear it with ``None``, and go back to the first page."""
        filters = dict(self.filters)
        if value is None:
            filters.pop(key, None)
        else:
            filters[key] = value
        return self._replace(filters=filters, page_index=0)

    def reset_filters(self) -> "QueryState":
        """Clear the search and every filter and go back to the first page."""
        return self._replace(search=None, filters={}, page_index=0)

    def set_sort(
        self, field: Optional[str], direction: SortDirection = SortDirection.ASC
    ) -> "QueryState":
        """Sort by ``field``, or remove sorting with ``None``."""
        sort = SortSpec(field=field, direction=direction) if field else None
        return self._replace(sort=sort)

    def force_refresh(self) -> "QueryState":
        """Bump the generation so the same query is fetched again."""
        return self._replace(generation=self.generation + 1)

    def to_params(self) -> Dict[str, Any]:
        """Controller-facing parameter enumeration."""
        return {
            "page_index": self.page_index,
            "page_size": self.page_size,
            "sort_field": self.sort.field if self.sort else None,
            "sort_direction": self.sort.direction.value if self.sort else None,
            "search": self.search,
            "filters": dict(self.filters),
        }
