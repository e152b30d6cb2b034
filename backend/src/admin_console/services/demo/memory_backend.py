"""In-memory admin backend used for demos and local development."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel

from admin_console.core.errors import FetchError, MutationError, RecordNotFoundError
from admin_console.models.page import PageResult
from admin_console.models.records import AdminRecord
from admin_console.models.resources import RESOURCES, ResourceDefinition
from admin_console.services.demo.seed_data import CITY_NAMES, SERVICE_NAMES, STATUS_NAMES, demo_records
from admin_console.services.mutation.base import MutationClient, action_name
from admin_console.services.resource.base import PageParams, ResourceClient

logger = logging.getLogger(__name__)

# filter name -> (record field, lookup of numeric option ids)
FILTER_FIELDS = {
    "cityId": ("city", CITY_NAMES),
    "serviceId": ("serviceName", SERVICE_NAMES),
    "status": ("status", STATUS_NAMES),
    "workerId": ("workerId", None),
    "customerId": ("customerId", None),
}


class InMemoryAdminBackend(ResourceClient, MutationClient):
    """Serves both the resource and the mutation contracts from memory.

    Filter value ``0`` means "all", matching the option lists of the
    console's filter drop-downs.
    """

    def __init__(
        self,
        records: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        latency: float = 0.0,
    ) -> None:
        self._records = records if records is not None else demo_records()
        self.latency = latency

    async def _simulate_latency(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)

    def _rows(self, resource: ResourceDefinition) -> List[Dict[str, Any]]:
        try:
            return self._records[resource.name]
        except KeyError:
            raise FetchError(resource.name, "no such collection") from None

    @staticmethod
    def _matches_filter(row: Dict[str, Any], key: str, value: Any) -> bool:
        field, options = FILTER_FIELDS.get(key, (key, None))
        if options is not None:
            value = options.get(int(value), value) if str(value).isdigit() else value
        return str(row.get(field)) == str(value)

    @staticmethod
    def _matches_search(row: Dict[str, Any], search: str) -> bool:
        needle = search.lower()
        return any(isinstance(item, str) and needle in item.lower() for item in row.values())

    async def fetch_page(self, resource: ResourceDefinition, params: PageParams) -> PageResult:
        await self._simulate_latency()
        rows = list(self._rows(resource))

        for key, value in params.filters.items():
            if value in (None, 0, "0"):
                continue
            rows = [row for row in rows if self._matches_filter(row, key, value)]
        if params.search:
            rows = [row for row in rows if self._matches_search(row, params.search)]
        if params.sort_field:
            field = params.sort_field if rows and params.sort_field in rows[0] else to_camel(params.sort_field)
            rows.sort(
                key=lambda row: (row.get(field) is None, row.get(field)),
                reverse=params.sort_direction == "desc",
            )

        start = params.page_index * params.page_size
        items = tuple(resource.parse(row) for row in rows[start:start + params.page_size])
        return PageResult(items=items, total_count=len(rows))

    async def fetch_one(self, resource: ResourceDefinition, record_id: Any) -> AdminRecord:
        await self._simulate_latency()
        for row in self._rows(resource):
            if str(resource.parse(row).key) == str(record_id):
                return resource.parse(row)
        raise RecordNotFoundError(resource.name, record_id)

    async def set_blocked_state(self, record_id: Any, blocked: bool) -> None:
        await self._simulate_latency()
        action = action_name(blocked)
        for definition in RESOURCES.values():
            if not definition.blockable:
                continue
            for row in self._records.get(definition.name, []):
                user_id = row.get("userId") if row.get("userId") is not None else row.get("id")
                if str(user_id) == str(record_id):
                    row["isBlocked"] = blocked
                    logger.info(f"Demo backend: {action}ed user {record_id}")
                    return
        raise MutationError(record_id, action, "user not found")
