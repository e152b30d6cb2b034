"""HTTP resource client for the remote admin API."""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from admin_console.core.context import ApiContext
from admin_console.core.errors import FetchError, RecordNotFoundError, describe_error
from admin_console.models.page import PageResult
from admin_console.models.records import AdminRecord
from admin_console.models.resources import ResourceDefinition
from admin_console.schemas.admin_api import PaginatedResponse
from admin_console.services.resource.base import PageParams, ResourceClient

logger = logging.getLogger(__name__)


def encode_sort(field: Optional[str], direction: Optional[str]) -> Optional[str]:
    """Encode a sort spec the way the admin API expects it (``ratingDesc``)."""
    if not field:
        return None
    suffix = "Desc" if direction == "desc" else "Asc"
    return f"{field}{suffix}"


class HttpResourceClient(ResourceClient):
    """Resource client backed by the admin REST API."""

    def __init__(self, context: ApiContext, client: Optional[httpx.AsyncClient] = None) -> None:
        self.context = context
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = self.context.create_client()
        return self._client

    def build_query(self, params: PageParams) -> Dict[str, Any]:
        """Translate page parameters into query string values."""
        query: Dict[str, Any] = {
            "pageIndex": params.page_index + self.context.page_index_base,
            "pageSize": params.page_size,
        }
        sort = encode_sort(params.sort_field, params.sort_direction)
        if sort:
            query["sort"] = sort
        if params.search:
            query["search"] = params.search
        for key, value in params.filters.items():
            if value is not None:
                query[key] = value
        return query

    async def fetch_page(self, resource: ResourceDefinition, params: PageParams) -> PageResult:
        """Fetch one page of ``resource`` from the admin API."""
        query = self.build_query(params)
        logger.info(f"Fetching {resource.name} with params: {query}")
        try:
            response = await self.client.get(resource.path, params=query)
            response.raise_for_status()
            envelope = PaginatedResponse.model_validate(response.json())
            items = tuple(resource.parse(item) for item in envelope.data)
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.error(f"Failed to fetch {resource.name}: {e}")
            raise FetchError(resource.name, describe_error(e)) from e

        return PageResult(items=items, total_count=envelope.count)

    async def fetch_one(self, resource: ResourceDefinition, record_id: Any) -> AdminRecord:
        """Fetch a single record of ``resource``."""
        try:
            response = await self.client.get(f"{resource.path}/{record_id}")
            if response.status_code == 404:
                raise RecordNotFoundError(resource.name, record_id)
            response.raise_for_status()
            return resource.parse(response.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.error(f"Failed to fetch {resource.name} {record_id}: {e}")
            raise FetchError(resource.name, describe_error(e)) from e

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
