from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from app.core.exceptions import OperationNotFoundError
from app.dependencies import HistoryDep
from app.models.schemas import (
    ClearHistoryResponse,
    ErrorResponse,
    ExportFormat,
    HistoryResponse,
    OperationRecord,
)
from app.services.export import ExportFormatter

router = APIRouter()


def _not_found(e: OperationNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=ErrorResponse(error="not_found", message=e.message, details=e.details).model_dump(),
    )


@router.get(
    "",
    response_model=HistoryResponse,
    summary="Get operation history",
    description="Retrieve paginated history of recent operations.",
)
async def get_history(
    history: HistoryDep,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
) -> HistoryResponse:
    """
    Get paginated operation history.

    Results are ordered most recent first.
    """
    operations, total = await history.list_recent(page=page, page_size=page_size)

    return HistoryResponse(
        items=[OperationRecord.model_validate(operation) for operation in operations],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.delete(
    "",
    response_model=ClearHistoryResponse,
    summary="Clear history",
    description="Delete every recorded operation.",
)
async def clear_history(history: HistoryDep) -> ClearHistoryResponse:
    """Clear the operation history."""
    deleted = await history.clear()
    return ClearHistoryResponse(deleted=deleted)


@router.get(
    "/{operation_id}",
    response_model=OperationRecord,
    responses={
        404: {"model": ErrorResponse, "description": "Operation not found"},
    },
    summary="Get specific operation",
    description="Retrieve one recorded operation by ID.",
)
async def get_operation(operation_id: int, history: HistoryDep) -> OperationRecord:
    """Get a specific operation by ID."""
    try:
        operation = await history.get(operation_id)
    except OperationNotFoundError as e:
        raise _not_found(e)

    return OperationRecord.model_validate(operation)


@router.get(
    "/{operation_id}/export",
    response_class=PlainTextResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Operation not found"},
    },
    summary="Export an operation",
    description="Render a recorded operation as plain text or JSON for sharing.",
)
async def export_operation(
    operation_id: int,
    history: HistoryDep,
    format: ExportFormat = Query(ExportFormat.PLAIN_TEXT, description="Export format"),
    include_metadata: bool = Query(True, description="Include timestamp and parameters"),
) -> PlainTextResponse:
    """Export a specific operation."""
    try:
        operation = await history.get(operation_id)
    except OperationNotFoundError as e:
        raise _not_found(e)

    formatter = ExportFormatter(include_metadata=include_metadata)
    body = formatter.export(OperationRecord.model_validate(operation), format)
    media_type = "application/json" if format == ExportFormat.JSON else "text/plain"

    return PlainTextResponse(
        content=body,
        media_type=media_type,
        headers={
            "Content-Disposition": (
                f'attachment; filename="operation-{operation_id}.{format.file_extension}"'
            ),
        },
    )
