from fastapi import APIRouter, HTTPException, status

from app.dependencies import DispatcherDep, HistoryDep, SettingsDep
from app.models.schemas import (
    CodecRequest,
    Direction,
    ErrorResponse,
    TransformRequest,
    TransformResponse,
)
from app.services.engines.base import TransformFailure, parameters_from_mapping

router = APIRouter()

_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or transform failed"},
}


async def _run_transform(
    request: CodecRequest,
    direction: Direction,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    settings: SettingsDep,
) -> TransformResponse:
    """Validate, transform and optionally record one request."""
    # Validate input length
    if len(request.text) > settings.max_input_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(
                error="input_too_long",
                message=f"Input exceeds maximum length of {settings.max_input_length}",
                details={"length": len(request.text), "max_length": settings.max_input_length},
            ).model_dump(),
        )

    params = parameters_from_mapping(request.cipher_type, request.parameters)
    result = dispatcher.transform(request.text, request.cipher_type, direction, params)

    if isinstance(result, TransformFailure):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(error=result.kind.value, message=result.reason).model_dump(),
        )

    operation_id = None
    if request.record:
        operation = await history.record(
            request.cipher_type,
            direction,
            request.text,
            result,
            params,
        )
        operation_id = operation.id

    return TransformResponse(
        output=result.output,
        cipher_type=request.cipher_type,
        direction=direction,
        metadata=result.metadata,
        operation_id=operation_id,
    )


@router.post(
    "/transform",
    response_model=TransformResponse,
    responses=_RESPONSES,
    summary="Encode or decode text",
    description="Run any supported cipher in the requested direction.",
)
async def transform_text(
    request: TransformRequest,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    settings: SettingsDep,
) -> TransformResponse:
    """Transform text in the direction given in the request body."""
    return await _run_transform(request, request.direction, dispatcher, history, settings)


@router.post(
    "/encode",
    response_model=TransformResponse,
    responses=_RESPONSES,
    summary="Encode text",
    description="Encode plaintext with a cipher or encoding.",
)
async def encode_text(
    request: CodecRequest,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    settings: SettingsDep,
) -> TransformResponse:
    """Encode plaintext."""
    return await _run_transform(request, Direction.ENCODE, dispatcher, history, settings)


@router.post(
    "/decode",
    response_model=TransformResponse,
    responses=_RESPONSES,
    summary="Decode text",
    description="Decode text produced by a cipher or encoding.",
)
async def decode_text(
    request: CodecRequest,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    settings: SettingsDep,
) -> TransformResponse:
    """Decode transformed text."""
    return await _run_transform(request, Direction.DECODE, dispatcher, history, settings)
