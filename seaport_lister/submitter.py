"""Sign Seaport orders and submit them as OpenSea listings."""

import json
import logging
from dataclasses import dataclass
from typing import Any

from .config import ListerConfig
from .constants import EIP_712_ORDER_TYPE, SEAPORT_CONTRACT_ADDRESS, SEAPORT_DOMAIN
from .errors import ListingSubmissionError, OrderBuildError, SigningError
from .listing_log import ListingLog
from .opensea_client import OpenSeaClient
from .order_builder import build_order
from .schemas import Nft, OrderComponents, SignedOrder
from .signer import WalletSigner
from .utils import asset_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingResult:
    """Outcome of one listing attempt."""

    success: bool
    message: str
    details: Any = None


def sign_order(signer: WalletSigner, order: OrderComponents) -> SignedOrder:
    """Sign an order with Seaport's EIP-712 domain and type schema."""
    signature = signer.sign_typed_data(
        dict(SEAPORT_DOMAIN), EIP_712_ORDER_TYPE, order.to_typed_message()
    )
    return SignedOrder(order=order, signature=signature)


def submit_listing(
    signer: WalletSigner,
    order: OrderComponents,
    client: OpenSeaClient,
    nft: Nft | None = None,
) -> ListingResult:
    """Sign an order and post it to the listing endpoint exactly once.

    Args:
        signer: The wallet signer for the offerer.
        order: The unsigned order.
        client: The OpenSea API client.
        nft: The listed token, used for the confirmation message.

    Returns:
        ListingResult: Success with a view link, or failure with the most
        specific reason available.

    """
    offer = order.offer[0]
    contract = nft.contract if nft else offer.token
    identifier = nft.identifier if nft else str(offer.identifier_or_criteria)
    name = nft.display_name if nft else "NFT"

    try:
        signed = sign_order(signer, order)
        client.post_listing(signed.to_payload(SEAPORT_CONTRACT_ADDRESS))
    except ListingSubmissionError as e:
        return ListingResult(
            success=False,
            message=f"Error listing NFT {name} (ID: {identifier}). Reason: {e!s}",
            details=e.payload,
        )
    except SigningError as e:
        return ListingResult(
            success=False,
            message=f"Error listing NFT {name} (ID: {identifier}). Reason: {e!s}",
        )

    return ListingResult(
        success=True,
        message=f'NFT "{name}" listed! Link: {asset_url(contract, identifier)}',
    )


def list_nft(
    signer: WalletSigner,
    nft: Nft,
    config: ListerConfig,
    client: OpenSeaClient,
    listing_log: ListingLog,
) -> ListingResult:
    """List one NFT: read the counter, build, sign and submit.

    Every outcome is recorded in ``listing_log``. Errors local to this token
    are returned as a failed result and never raised.

    Args:
        signer: The wallet signer.
        nft: The token to list.
        config: The run configuration.
        client: The OpenSea API client.
        listing_log: Sink for operator and log output.

    Returns:
        ListingResult: The outcome of the attempt.

    """
    price = config.listing_price_eth
    try:
        seller = signer.address
    except SigningError as e:
        result = ListingResult(
            success=False,
            message=f"Error listing NFT {nft.display_name} (ID: {nft.identifier}). Reason: {e!s}",
        )
        _record_result(listing_log, result)
        return result

    listing_log.record(
        f"[START] Attempting to list {nft.display_name} (Token ID: {nft.identifier}) "
        f"from wallet {seller} for {price} ETH"
    )

    try:
        counter = signer.get_counter(SEAPORT_CONTRACT_ADDRESS)
        order = build_order(nft, seller, price, config.listing_duration_minutes, counter)
    except (SigningError, OrderBuildError) as e:
        result = ListingResult(
            success=False,
            message=f"Error listing NFT {nft.display_name} (ID: {nft.identifier}). Reason: {e!s}",
        )
    else:
        result = submit_listing(signer, order, client, nft)

    _record_result(listing_log, result)
    return result


def _record_result(listing_log: ListingLog, result: ListingResult) -> None:
    if result.success:
        listing_log.record(f"[SUCCESS] SUCCESS: {result.message}")
        return

    listing_log.record(f"[FAILED] FAILED: {result.message}", error=True)
    if result.details is not None:
        listing_log.append(f"[FAILED] Error Details: {json.dumps(result.details, indent=2)}")
