"""Definitions of the resources the console can list."""

from typing import Dict, Tuple, Type

from pydantic import BaseModel, ConfigDict

from admin_console.core.errors import UnknownResourceError
from admin_console.models.records import AdminRecord, BlockableRecord, Customer, ServiceRequest, Worker


class ResourceDefinition(BaseModel):
    """Where a resource lives on the admin API and how its rows look."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    path: str
    record_model: Type[AdminRecord]
    filter_names: Tuple[str, ...] = ()
    label: str = "record"

    @property
    def blockable(self) -> bool:
        """Whether rows of this resource support block / unblock."""
        return issubclass(self.record_model, BlockableRecord)

    def parse(self, data: Dict) -> AdminRecord:
        """Parse one wire record."""
        return self.record_model.model_validate(data)


WORKERS = ResourceDefinition(
    name="workers",
    path="/Admin/workers",
    record_model=Worker,
    filter_names=("cityId", "serviceId"),
    label="worker",
)

CUSTOMERS = ResourceDefinition(
    name="customers",
    path="/Admin/Customers",
    record_model=Customer,
    filter_names=("cityId",),
    label="customer",
)

REQUESTS = ResourceDefinition(
    name="requests",
    path="/Admin/requests",
    record_model=ServiceRequest,
    filter_names=("status", "serviceId", "workerId", "customerId"),
    label="request",
)

RESOURCES: Dict[str, ResourceDefinition] = {
    definition.name: definition for definition in (WORKERS, CUSTOMERS, REQUESTS)
}


def get_resource(name: str) -> ResourceDefinition:
    """Look up a resource definition by name."""
    try:
        return RESOURCES[name]
    except KeyError:
        raise UnknownResourceError(name) from None
