from .base import Base
from .exceptions import (
    AddressLookupError,
    InvalidPostalCodeError,
    PostalCodeNotFoundError,
    UpstreamUnavailableError,
    InternalLookupError,
)
