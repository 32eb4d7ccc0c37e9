from .http_client_manager import HTTPClientManager, get_http_client_manager
from .postal_code import is_valid_postal_code, normalize_postal_code
from .address_resolver import AddressResolver, ViaCepResolver
from .address_lookup_service import (
    AddressLookupService,
    get_address_lookup_service,
    map_directory_payload,
)
