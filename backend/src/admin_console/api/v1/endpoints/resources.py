"""Record detail endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from admin_console.core.dependencies import get_table_registry
from admin_console.core.errors import FetchError, RecordNotFoundError, UnknownResourceError
from admin_console.schemas.table_api import RecordResponse
from admin_console.services.table_registry import TableRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{resource}/{record_id}",
    response_model=RecordResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a record by ID",
)
async def get_record(
    resource: str = Path(..., description="The resource of the record"),
    record_id: int = Path(..., description="The ID of the record"),
    registry: TableRegistry = Depends(get_table_registry),
) -> RecordResponse:
    """Get a single worker, customer or service request."""
    try:
        controller = registry.get(resource) or registry.create(resource)
        record = await controller.fetch_record(record_id)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except FetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    return RecordResponse(resource=resource, record=record.model_dump(mode="json", by_alias=True))
