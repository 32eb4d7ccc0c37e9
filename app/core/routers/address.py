from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.core.schemas import AddressRecord, ErrorResponse
from app.core.services import AddressLookupService, get_address_lookup_service

prefix = "/address"
router = APIRouter(prefix=prefix)


@router.get(
    "/{postal_code:path}",
    response_model=AddressRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Look up an address by CEP",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def get_address(
        postal_code: str,
        service: Annotated[AddressLookupService, Depends(get_address_lookup_service)]
):
    """
    Resolve a Brazilian postal code (`01310-100` or `01310100`) through the address directory.

    The segment is matched as a path so empty values and values containing
    `/` still go through validation.

    Failures are rendered by the AddressLookupError handler registered in `app.main`.
    """
    return await service.lookup(postal_code)
