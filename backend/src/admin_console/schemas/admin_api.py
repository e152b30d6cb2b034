"""Wire schemas of the remote admin API."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PaginatedResponse(BaseModel):
    """Paginated list envelope returned by the admin API list endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page_index: int = Field(default=0, alias="pageIndex")
    page_size: int = Field(default=0, alias="pageSize")
    count: int = Field(default=0, ge=0)
    data: List[Dict[str, Any]] = Field(default_factory=list)
