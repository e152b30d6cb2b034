"""Tests for the table controller wiring query state, pager and row actions."""

import asyncio

import pytest

from admin_console.core.errors import FetchError, RecordNotFoundError
from admin_console.models.query_state import SortDirection
from admin_console.models.resources import WORKERS
from admin_console.services.notification.base import NotificationLevel
from admin_console.services.table.table_controller import TableController

from conftest import (
    GatedResourceClient,
    RecordingMutationClient,
    StubResourceClient,
    make_workers,
    page_of,
    settle,
)


def make_controller(client, notifier, mutation_client=None):
    """Create a worker table controller with no settle delay."""
    return TableController(
        resource=WORKERS,
        resource_client=client,
        mutation_client=mutation_client or RecordingMutationClient(),
        notifier=notifier,
        page_size=10,
        settle_delay=0,
    )


@pytest.mark.asyncio
async def test_mount_loads_first_page(notifier):
    """Test that mounting fetches page 0 at the default size."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)

    snapshot = await controller.mount()

    assert controller.mounted
    assert snapshot.total_count == 48
    assert snapshot.page_count == 5
    assert len(snapshot.items) == 10
    assert snapshot.loading is False
    assert snapshot.error is None


@pytest.mark.asyncio
async def test_page_size_change_refetches(notifier):
    """Test that 48 rows at size 20 give three pages."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)
    await controller.mount()

    snapshot = await controller.set_page_size(20)

    assert client.calls[-1].page_size == 20
    assert client.calls[-1].page_index == 0
    assert snapshot.page_count == 3
    assert len(snapshot.items) == 20


@pytest.mark.asyncio
async def test_page_size_change_clamps_to_known_total(notifier):
    """Test that the page index stays inside the new page count."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)
    await controller.mount()
    await controller.set_page(3)

    snapshot = await controller.set_page_size(20)

    assert snapshot.query.page_index == 2
    assert [worker.id for worker in snapshot.items][0] == 41


@pytest.mark.asyncio
async def test_out_of_range_page_is_adopted(notifier):
    """Test that page 9 of 87 rows ends on page 8 with seven rows."""
    client = StubResourceClient(make_workers(87))
    controller = make_controller(client, notifier)
    await controller.mount()

    snapshot = await controller.set_page(9)

    assert [params.page_index for params in client.calls] == [0, 9, 8]
    assert controller.query.page_index == 8
    assert snapshot.query.page_index == 8
    assert len(snapshot.items) == 7


@pytest.mark.asyncio
async def test_search_resets_page_and_fetches(notifier):
    """Test that searching from page 2 fetches page 0 with the search text."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)
    await controller.mount()
    await controller.set_page(2)

    snapshot = await controller.set_search("worker")

    assert snapshot.query.page_index == 0
    assert client.calls[-1].search == "worker"
    assert client.calls[-1].page_index == 0


@pytest.mark.asyncio
async def test_sort_keeps_page(notifier):
    """Test that sorting re-fetches the same page."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)
    await controller.mount()
    await controller.set_page(2)

    await controller.set_sort("rating", SortDirection.DESC)

    assert client.calls[-1].page_index == 2
    assert client.calls[-1].sort_field == "rating"
    assert client.calls[-1].sort_direction == "desc"


@pytest.mark.asyncio
async def test_slow_fetch_does_not_overwrite_newer_search(notifier):
    """Test the table ends on the result of the newest query."""
    client = GatedResourceClient()
    controller = make_controller(client, notifier)

    mount = asyncio.create_task(controller.mount())
    await settle()
    search = asyncio.create_task(controller.set_search("a"))
    await settle()

    client.resolve(1, page_of(make_workers(2, start=30), total_count=2))
    await search
    client.resolve(0, page_of(make_workers(10), total_count=48))
    await mount

    snapshot = controller.snapshot()
    assert snapshot.query.search == "a"
    assert snapshot.total_count == 2
    assert [worker.id for worker in snapshot.items] == [30, 31]


@pytest.mark.asyncio
async def test_listeners_receive_each_new_state(notifier):
    """Test subscribed listeners run after the controller's own fetch."""
    client = StubResourceClient(make_workers(12))
    controller = make_controller(client, notifier)
    await controller.mount()
    seen = []

    async def listener(query):
        seen.append((query.filters, len(client.calls)))

    controller.subscribe(listener)
    await controller.set_filter("cityId", 3)
    controller.unsubscribe(listener)
    await controller.set_filter("cityId", 4)

    assert seen == [({"cityId": 3}, 2)]


@pytest.mark.asyncio
async def test_listeners_receive_clamped_page(notifier):
    """Test that listeners see the corrected page, not the out-of-range one."""
    client = StubResourceClient(make_workers(87))
    controller = make_controller(client, notifier)
    await controller.mount()
    seen = []

    async def listener(query):
        seen.append(query.page_index)

    controller.subscribe(listener)
    await controller.set_page(9)

    assert seen == [8]
    assert controller.query.page_index == 8
    # The corrected page is not fetched a second time
    assert [params.page_index for params in client.calls] == [0, 9, 8]


@pytest.mark.asyncio
async def test_set_query_fetches_once(notifier):
    """Test that a combined change issues a single fetch."""
    client = StubResourceClient(make_workers(48))
    controller = make_controller(client, notifier)
    await controller.mount()

    query = (
        controller.query.set_filter("cityId", 3)
        .set_filter("serviceId", 1)
        .set_search("worker")
        .set_page_size(20, controller.known_total)
        .set_page(1)
    )
    snapshot = await controller.set_query(query)

    assert len(client.calls) == 2
    assert client.calls[-1].filters == {"cityId": 3, "serviceId": 1}
    assert client.calls[-1].page_size == 20
    assert snapshot.query == query


@pytest.mark.asyncio
async def test_snapshot_lists_filter_names(notifier):
    """Test that the snapshot names the filters the resource accepts."""
    controller = make_controller(StubResourceClient([]), notifier)

    assert controller.snapshot().filter_names == ("cityId", "serviceId")
    assert controller.known_total is None


@pytest.mark.asyncio
async def test_equal_state_does_not_refetch(notifier):
    """Test that a change producing an equal state is ignored."""
    client = StubResourceClient(make_workers(12))
    controller = make_controller(client, notifier)
    await controller.mount()

    await controller.set_page(0)
    await controller.set_filter("cityId", None)
    await controller.set_search("  ")

    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_force_refresh_refetches_same_page(notifier):
    """Test that a forced refresh re-reads an unchanged view."""
    client = StubResourceClient(make_workers(12))
    controller = make_controller(client, notifier)
    await controller.mount()

    snapshot = await controller.force_refresh()

    assert len(client.calls) == 2
    assert client.calls[0] == client.calls[1]
    assert snapshot.query.generation == 1


@pytest.mark.asyncio
async def test_fetch_failure_is_notified(notifier):
    """Test that a failed load surfaces on the snapshot and as a notification."""
    client = StubResourceClient(make_workers(5))
    controller = make_controller(client, notifier)
    await controller.mount()

    client.error = FetchError("workers", "HTTP 500 Internal Server Error")
    snapshot = await controller.force_refresh()

    assert snapshot.error == "HTTP 500 Internal Server Error"
    assert len(snapshot.items) == 5
    assert notifier.pending[-1].level is NotificationLevel.ERROR
    assert "Failed to load workers" in notifier.pending[-1].message


@pytest.mark.asyncio
async def test_toggle_refreshes_the_table(notifier):
    """Test that a successful toggle ends with a forced refresh."""
    rows = make_workers(5)
    client = StubResourceClient(rows)
    mutation_client = RecordingMutationClient()
    controller = make_controller(client, notifier, mutation_client)
    await controller.mount()

    # The server flips the flag; the table only shows it after the refresh
    async def set_blocked_state(record_id, blocked):
        mutation_client.calls.append((record_id, blocked))
        rows[1]["isBlocked"] = blocked

    mutation_client.set_blocked_state = set_blocked_state
    result = await controller.toggle_blocked(2)

    assert result.succeeded
    assert mutation_client.calls == [(1002, True)]
    assert len(client.calls) == 2
    assert controller.query.generation == 1
    assert controller.snapshot().items[1].is_blocked is True
    assert not controller.is_busy(2)


@pytest.mark.asyncio
async def test_busy_rows_appear_in_snapshot(notifier):
    """Test that an in-flight toggle is visible as a busy row."""
    client = StubResourceClient(make_workers(5))
    mutation_client = RecordingMutationClient(gated=True)
    controller = make_controller(client, notifier, mutation_client)
    await controller.mount()

    task = asyncio.create_task(controller.toggle_blocked(4))
    await settle()
    assert controller.snapshot().busy_ids == frozenset({4})

    mutation_client.release.set()
    await task
    assert controller.snapshot().busy_ids == frozenset()


@pytest.mark.asyncio
async def test_unmount_clears_listeners_and_busy_rows(notifier):
    """Test that unmounting stops further fetches."""
    client = StubResourceClient(make_workers(5))
    controller = make_controller(client, notifier)
    await controller.mount()
    controller.tracker.begin(3)

    controller.unmount()
    await controller.set_filter("cityId", 1)

    assert not controller.mounted
    assert len(controller.tracker) == 0
    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_fetch_record(notifier):
    """Test loading one record and the not-found notification."""
    client = StubResourceClient(make_workers(5))
    controller = make_controller(client, notifier)

    worker = await controller.fetch_record(3)
    assert worker.name == "Worker 3"

    with pytest.raises(RecordNotFoundError):
        await controller.fetch_record(99)
    assert notifier.pending[-1].level is NotificationLevel.ERROR
