from app.core.schemas.base import BaseSchema
from app.core.schemas.cep import AddressRecord, ErrorResponse
