"""API endpoints for resource table operations."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from admin_console.core.dependencies import get_table_registry
from admin_console.core.errors import UnknownResourceError
from admin_console.schemas.table_api import (
    MutationResponse,
    QueryUpdate,
    TableResponse,
)
from admin_console.services.table.table_controller import TableController
from admin_console.services.table_registry import DEFAULT_VIEW, TableRegistry

# Set up logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


async def _mounted_table(resource: str, view: str, registry: TableRegistry) -> TableController:
    try:
        return await registry.get_or_mount(resource, view)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get(
    "/{resource}",
    response_model=TableResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a resource table",
    description="Mount the table on first use and return its current page.",
)
async def get_table(
    resource: str = Path(..., description="The resource to list"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> TableResponse:
    """Get the current snapshot of a resource table."""
    controller = await _mounted_table(resource, view, registry)
    return TableResponse.from_snapshot(controller.snapshot())


@router.patch(
    "/{resource}/query",
    response_model=TableResponse,
    status_code=status.HTTP_200_OK,
    summary="Update the table query",
    description="Apply search, filter, sort and pagination changes with a single fetch.",
)
async def update_query(
    query_update: QueryUpdate,
    resource: str = Path(..., description="The resource to list"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> TableResponse:
    """Apply the fields present in the request to the table query."""
    controller = await _mounted_table(resource, view, registry)
    fields = query_update.model_fields_set
    query = controller.query

    # Result-set changes first: they reset the page index
    if "filters" in fields:
        for key, value in query_update.filters.items():
            query = query.set_filter(key, value)
    if "search" in fields:
        query = query.set_search(query_update.search)
    if "sort_field" in fields:
        query = query.set_sort(query_update.sort_field, query_update.sort_direction)
    if query_update.page_size is not None:
        query = query.set_page_size(query_update.page_size, controller.known_total)
    if query_update.page_index is not None:
        query = query.set_page(query_update.page_index)

    return TableResponse.from_snapshot(await controller.set_query(query))


@router.post(
    "/{resource}/reset-filters",
    response_model=TableResponse,
    status_code=status.HTTP_200_OK,
    summary="Reset search and filters",
)
async def reset_filters(
    resource: str = Path(..., description="The resource to list"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> TableResponse:
    """Clear the search and every filter."""
    controller = await _mounted_table(resource, view, registry)
    return TableResponse.from_snapshot(await controller.reset_filters())


@router.post(
    "/{resource}/refresh",
    response_model=TableResponse,
    status_code=status.HTTP_200_OK,
    summary="Refresh the table",
    description="Re-fetch the current page without changing the query.",
)
async def refresh_table(
    resource: str = Path(..., description="The resource to list"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> TableResponse:
    """Force a refresh of the current page."""
    controller = await _mounted_table(resource, view, registry)
    return TableResponse.from_snapshot(await controller.force_refresh())


@router.post(
    "/{resource}/rows/{record_id}/toggle-blocked",
    response_model=MutationResponse,
    status_code=status.HTTP_200_OK,
    summary="Block or unblock a row",
    description="Flip the blocked state of a row on the current page.",
)
async def toggle_blocked(
    resource: str = Path(..., description="The resource of the row"),
    record_id: int = Path(..., description="The ID of the row"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> MutationResponse:
    """Block or unblock one row."""
    controller = await _mounted_table(resource, view, registry)
    if not controller.resource.blockable:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Rows of {resource} cannot be blocked",
        )

    result = await controller.toggle_blocked(record_id)
    if result.rejected:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.reason)
    if not result.succeeded:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.reason)

    return MutationResponse.from_result(result)


@router.delete(
    "/{resource}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unmount a resource table",
)
async def unmount_table(
    resource: str = Path(..., description="The resource table"),
    view: str = Query(DEFAULT_VIEW, description="Client-side table instance"),
    registry: TableRegistry = Depends(get_table_registry),
) -> None:
    """Discard the table's query state."""
    if not registry.unmount(resource, view):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Table {resource} is not mounted for view {view}",
        )
