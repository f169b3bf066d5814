from fastapi import APIRouter, Query

from app.dependencies import DispatcherDep
from app.models.schemas import CipherInfo, CipherType, ReferenceEntryResponse
from app.services.reference import get_entries

router = APIRouter()


@router.get(
    "/ciphers",
    response_model=list[CipherInfo],
    summary="List supported ciphers",
    description="List every cipher kind with the parameters it accepts.",
)
async def list_ciphers(dispatcher: DispatcherDep) -> list[CipherInfo]:
    """List registered cipher handlers."""
    return [
        CipherInfo(
            cipher_type=engine.cipher_type,
            name=engine.name,
            description=engine.description,
            parameters=list(engine.parameter_names),
        )
        for engine in dispatcher.registry.get_all_engines()
    ]


@router.get(
    "/reference",
    response_model=list[ReferenceEntryResponse],
    summary="Reference library",
    description="Educational articles about the supported ciphers.",
)
async def list_reference(
    cipher_type: CipherType | None = Query(None, description="Only entries about this cipher"),
) -> list[ReferenceEntryResponse]:
    """List reference entries, optionally filtered by cipher kind."""
    return [ReferenceEntryResponse.model_validate(entry) for entry in get_entries(cipher_type)]
