"""Exception hierarchy for the admin console."""

from typing import Any, Optional

import httpx


class AdminConsoleError(Exception):
    """Base class for all errors raised by the admin console."""


class UnknownResourceError(AdminConsoleError):
    """Raised when a resource name has no registered definition."""

    def __init__(self, name: str):
        super().__init__(f"Unknown resource: {name}")
        self.name = name


class FetchError(AdminConsoleError):
    """Raised when a page or a single record could not be loaded."""

    def __init__(self, resource: str, reason: str):
        super().__init__(f"Failed to load {resource}: {reason}")
        self.resource = resource
        self.reason = reason


class RecordNotFoundError(FetchError):
    """Raised when a record lookup returns nothing."""

    def __init__(self, resource: str, record_id: Any):
        super().__init__(resource, f"record {record_id} not found")
        self.record_id = record_id


class MutationError(AdminConsoleError):
    """Raised when a row action (block / unblock) failed."""

    def __init__(self, record_id: Any, action: str, reason: str):
        super().__init__(f"Failed to {action} record {record_id}: {reason}")
        self.record_id = record_id
        self.action = action
        self.reason = reason


def describe_error(error: BaseException) -> str:
    """Normalize an exception into a short human-readable description."""
    if isinstance(error, (FetchError, MutationError)):
        return error.reason
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        detail: Optional[str] = None
        try:
            body = response.json()
            if isinstance(body, dict):
                detail = body.get("message") or body.get("detail") or body.get("title")
        except ValueError:
            detail = None
        text = f"HTTP {response.status_code}"
        if response.reason_phrase:
            text = f"{text} {response.reason_phrase}"
        return f"{text}: {detail}" if detail else text
    if isinstance(error, httpx.TimeoutException):
        return "request timed out"
    if isinstance(error, httpx.TransportError):
        return f"connection error: {error}" if str(error) else "connection error"
    return str(error) or error.__class__.__name__
