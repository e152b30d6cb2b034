"""Shared fakes and fixtures for the table controller tests."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from admin_console.core.errors import RecordNotFoundError
from admin_console.models.page import PageResult
from admin_console.models.resources import ResourceDefinition, WORKERS
from admin_console.services.mutation.base import MutationClient
from admin_console.services.notification.logging_notifier import LoggingNotifier
from admin_console.services.resource.base import PageParams, ResourceClient


def make_workers(count: int, start: int = 1, blocked: bool = False) -> List[Dict[str, Any]]:
    """Create ``count`` worker rows in wire format."""
    return [
        {
            "id": worker_id,
            "userId": 1000 + worker_id,
            "name": f"Worker {worker_id}",
            "city": "Chicago",
            "serviceName": "Plumbing",
            "isBlocked": blocked,
        }
        for worker_id in range(start, start + count)
    ]


def page_of(rows: List[Dict[str, Any]], total_count: Optional[int] = None) -> PageResult:
    """Build a page result of workers."""
    return PageResult(
        items=tuple(WORKERS.parse(row) for row in rows),
        total_count=len(rows) if total_count is None else total_count,
    )


class StubResourceClient(ResourceClient):
    """Serves pages out of a list of rows and records every request."""

    def __init__(self, rows: List[Dict[str, Any]]):
        self.rows = rows
        self.calls: List[PageParams] = []
        self.error: Optional[Exception] = None

    async def fetch_page(self, resource: ResourceDefinition, params: PageParams) -> PageResult:
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        start = params.page_index * params.page_size
        rows = self.rows[start:start + params.page_size]
        return PageResult(
            items=tuple(resource.parse(row) for row in rows),
            total_count=len(self.rows),
        )

    async def fetch_one(self, resource: ResourceDefinition, record_id: Any):
        for row in self.rows:
            if row["id"] == record_id:
                return resource.parse(row)
        raise RecordNotFoundError(resource.name, record_id)


class GatedResourceClient(ResourceClient):
    """Holds every fetch until the test resolves or rejects it."""

    def __init__(self):
        self.pending: List[Tuple[PageParams, asyncio.Future]] = []

    async def fetch_page(self, resource: ResourceDefinition, params: PageParams) -> PageResult:
        future = asyncio.get_running_loop().create_future()
        self.pending.append((params, future))
        return await future

    async def fetch_one(self, resource: ResourceDefinition, record_id: Any):
        raise RecordNotFoundError(resource.name, record_id)

    def resolve(self, index: int, result: PageResult) -> None:
        self.pending[index][1].set_result(result)

    def reject(self, index: int, error: Exception) -> None:
        self.pending[index][1].set_exception(error)


class RecordingMutationClient(MutationClient):
    """Records calls; optionally fails or waits for a release."""

    def __init__(self, error: Optional[Exception] = None, gated: bool = False):
        self.calls: List[Tuple[Any, bool]] = []
        self.error = error
        self.release = asyncio.Event() if gated else None

    async def set_blocked_state(self, record_id: Any, blocked: bool) -> None:
        self.calls.append((record_id, blocked))
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error


async def settle() -> None:
    """Let every ready task run until it blocks again."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def notifier():
    """Create a notifier that keeps its messages."""
    return LoggingNotifier(history=20)
