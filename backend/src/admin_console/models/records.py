"""Record models of the remote admin API."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AdminRecord(BaseModel):
    """Base model for records read from the admin API (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def key(self) -> Any:
        """Identifier of the record within its table."""
        raise NotImplementedError


class BlockableRecord(AdminRecord):
    """A user-backed record that can be blocked and unblocked."""

    id: int
    user_id: Optional[int] = None
    name: str = ""
    is_blocked: bool = False

    @property
    def key(self) -> int:
        return self.id

    @property
    def mutation_id(self) -> int:
        """Identifier sent to block-user / unblock-user."""
        return self.user_id if self.user_id is not None else self.id


class Worker(BlockableRecord):
    """A service worker."""

    email: str = ""
    city: str = ""
    phone_number: str = ""
    profile_picture_url: Optional[str] = None
    age: Optional[int] = None
    address: str = ""
    service_name: str = ""
    rating: float = 0.0
    description: str = ""
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    completed_requests: int = 0
    is_locked: bool = False


class Customer(BlockableRecord):
    """A customer."""

    email: str = ""
    phone_number: str = ""
    profile_picture_url: Optional[str] = None
    address: str = ""
    age: Optional[int] = None
    city: str = ""
    requests_count: int = 0


class ServiceRequest(AdminRecord):
    """A service request between a customer and a worker."""

    request_id: int
    worker_name: str = ""
    customer_name: str = ""
    customer_address: str = ""
    service_name: str = ""
    request_date: Optional[datetime] = None
    comment: str = ""
    status: str = ""
    customer_suggested_price: float = 0.0
    worker_suggested_price: float = 0.0
    final_agreed_price: float = 0.0
    negotiation_status: str = ""

    @property
    def key(self) -> int:
        return self.request_id
