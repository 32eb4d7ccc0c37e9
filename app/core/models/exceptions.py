from typing import Optional

from fastapi import status


class AddressLookupError(Exception):
    """Base exception for every outcome of a failed postal code lookup."""

    message = "internal error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidPostalCodeError(AddressLookupError):
    """Raised when the caller-supplied postal code fails the syntax check."""

    message = "invalid postal code"
    status_code = status.HTTP_400_BAD_REQUEST


class PostalCodeNotFoundError(AddressLookupError):
    """Raised when a well-formed postal code is absent from the directory."""

    message = "postal code not found"
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamUnavailableError(AddressLookupError):
    """Raised when the directory call fails at the transport or returns an error status."""

    message = "upstream lookup failed"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InternalLookupError(AddressLookupError):
    """Raised for any other unexpected failure during a lookup."""
    pass
