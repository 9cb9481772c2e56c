"""HTTP client for the OpenSea holdings and listing endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from pydantic import ValidationError

from .constants import CHAIN, DEFAULT_REQUEST_TIMEOUT, OPENSEA_API_BASE_URL
from .errors import HoldingsQueryError, ListingSubmissionError
from .schemas import AccountNftsResponse, Nft

logger = logging.getLogger(__name__)


def extract_error_message(payload: Any) -> str | None:
    """Pull the most specific error message out of an API error body.

    Args:
        payload: Decoded JSON body, or raw text.

    Returns:
        The message, or None if the body carries none.

    """
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(error) for error in errors)
        detail = payload.get("detail")
        if isinstance(detail, str) and detail.strip():
            return detail
    return None


def _decode_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class OpenSeaClient:
    """Thin synchronous client for the OpenSea v2 API.

    Args:
        api_key: The OpenSea API key, sent as ``X-API-KEY``.
        base_url: API root, defaults to the mainnet v2 API.
        chain: Chain slug used in account paths.
        timeout: Per-request timeout in seconds.
        session: Optional pre-built ``requests.Session``.

    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENSEA_API_BASE_URL,
        chain: str = CHAIN,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.chain = chain
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"accept": "application/json", "X-API-KEY": api_key})

    def get_account_nfts(self, address: str) -> list[Nft]:
        """Fetch the first page of NFTs held by ``address``.

        Entries that do not match the expected shape are dropped with a
        warning; a body without an ``nfts`` list fails the whole query.

        Args:
            address: The wallet address.

        Returns:
            list[Nft]: The wallet's NFTs in API order.

        Raises:
            HoldingsQueryError: On transport errors, non-2xx responses or an
                unexpected body.

        """
        url = f"{self.base_url}/chain/{self.chain}/account/{address}/nfts"
        logger.debug(f"Fetching NFTs: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise HoldingsQueryError(str(e)) from e

        body = _decode_body(response)
        if not response.ok:
            reason = extract_error_message(body) or f"HTTP {response.status_code} {response.reason}"
            raise HoldingsQueryError(reason)

        try:
            page = AccountNftsResponse.model_validate(body)
        except ValidationError as e:
            raise HoldingsQueryError(f"Unexpected holdings response: {e!s}") from e

        if page.next:
            logger.info(f"Holdings for {address} span multiple pages; only the first is used")

        nfts: list[Nft] = []
        for raw in page.nfts:
            try:
                nfts.append(Nft.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed NFT entry for {address}: {e!s}")
        return nfts

    def post_listing(self, payload: dict[str, Any]) -> Any:
        """Submit a signed listing.

        Args:
            payload: Body with ``parameters`` and ``protocol_address``.

        Returns:
            The decoded response body.

        Raises:
            ListingSubmissionError: On transport errors or non-2xx responses.

        """
        url = f"{self.base_url}/listings"
        logger.debug(f"Submitting listing to OpenSea API: {url}")
        logger.debug(f"Payload: {json.dumps(payload, indent=2)}")

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ListingSubmissionError(str(e)) from e

        body = _decode_body(response)
        if not response.ok:
            logger.error(f"OpenSea API error: {response.status_code} - {response.text}")
            reason = extract_error_message(body) or f"HTTP {response.status_code} {response.reason}"
            raise ListingSubmissionError(reason, status_code=response.status_code, payload=body)
        return body
