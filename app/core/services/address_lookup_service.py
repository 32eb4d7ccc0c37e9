import logging
from typing import Any, Dict

from app.core.config import settings
from app.core.models.exceptions import (
    AddressLookupError,
    InternalLookupError,
    InvalidPostalCodeError,
    PostalCodeNotFoundError,
)
from app.core.schemas import AddressRecord
from app.core.services.address_resolver import AddressResolver, ViaCepResolver
from app.core.services.http_client_manager import get_http_client_manager
from app.core.services.postal_code import is_valid_postal_code, normalize_postal_code

logger = logging.getLogger(__name__)

# Directory field -> AddressRecord field
DIRECTORY_FIELD_MAP: Dict[str, str] = {
    "cep": "cep",
    "logradouro": "address",
    "bairro": "neighborhood",
    "localidade": "city",
    "uf": "state",
    "ibge": "ibge",
    "gia": "gia",
    "ddd": "ddd",
    "siafi": "siafi",
}

NOT_FOUND_MARKER = "erro"


def is_not_found(payload: Dict[str, Any]) -> bool:
    """ViaCEP flags unknown codes with ``"erro": true`` (older versions send the string ``"true"``)."""
    marker = payload.get(NOT_FOUND_MARKER)
    if isinstance(marker, str):
        return marker.strip().lower() in ("true", "1")
    return bool(marker)


def map_directory_payload(payload: Dict[str, Any]) -> AddressRecord:
    fields = {
        target: payload[source]
        for source, target in DIRECTORY_FIELD_MAP.items()
        if payload.get(source) is not None
    }
    return AddressRecord(**fields)


class AddressLookupService:
    """Validates, normalizes and resolves a single postal code."""

    def __init__(self, resolver: AddressResolver):
        self.resolver = resolver

    async def lookup(self, postal_code: str) -> AddressRecord:
        """
        Resolve a raw postal code into an AddressRecord.

        Every failure leaves this method as an AddressLookupError subclass:
        InvalidPostalCodeError, PostalCodeNotFoundError, UpstreamUnavailableError
        or InternalLookupError.
        """
        try:
            if not is_valid_postal_code(postal_code):
                raise InvalidPostalCodeError()

            cep = normalize_postal_code(postal_code)
            payload = await self.resolver.resolve(cep)

            if is_not_found(payload):
                logger.info("CEP %s not found in the address directory", cep)
                raise PostalCodeNotFoundError()

            return map_directory_payload(payload)

        except AddressLookupError:
            raise
        except Exception as e:
            logger.error("Unexpected failure looking up CEP %r: %s", postal_code, e, exc_info=True)
            raise InternalLookupError() from e


def get_address_lookup_service() -> AddressLookupService:
    """FastAPI dependency wiring the lookup service to ViaCEP over the shared client pool."""
    client = get_http_client_manager().get_client()
    resolver = ViaCepResolver(client, settings.CEP_PROVIDER_BASE_URL)
    return AddressLookupService(resolver)
