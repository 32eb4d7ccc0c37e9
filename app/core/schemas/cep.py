from typing import Optional

from pydantic import ConfigDict

from app.core.schemas.base import BaseSchema


class AddressRecord(BaseSchema):
    """Address resolved for a postal code, in the service's own vocabulary."""
    model_config = ConfigDict(frozen=True)

    cep: str
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    ibge: Optional[str] = None
    gia: Optional[str] = None
    ddd: Optional[str] = None
    siafi: Optional[str] = None


class ErrorResponse(BaseSchema):
    error: str
