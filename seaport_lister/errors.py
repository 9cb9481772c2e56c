"""Exceptions raised by the Seaport batch lister."""

from typing import Any


class SeaportListerError(Exception):
    """Base class for all lister errors."""


class ConfigurationError(SeaportListerError):
    """Raised when settings are missing or inconsistent at startup."""


class HoldingsQueryError(SeaportListerError):
    """Raised when a wallet's NFT holdings cannot be fetched or parsed."""


class OrderBuildError(SeaportListerError, ValueError):
    """Raised when an order cannot be derived from its inputs."""


class SigningError(SeaportListerError):
    """Raised when a signer cannot sign or read chain state."""


class ListingSubmissionError(SeaportListerError):
    """Raised when the marketplace rejects or never receives a listing.

    Args:
        message: The most specific reason available.
        status_code: HTTP status code, if a response was received.
        payload: Decoded response body, if any.

    """

    def __init__(self, message: str, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
