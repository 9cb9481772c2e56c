"""Build Seaport order components for a single NFT listing."""

import logging
import secrets
import time

from .constants import (
    OPENSEA_CONDUIT_KEY,
    ZERO_ADDRESS,
    ZERO_BYTES32,
    ItemType,
    OrderType,
)
from .errors import OrderBuildError
from .schemas import ConsiderationItem, Nft, OfferItem, OrderComponents
from .utils import format_wei_as_eth, parse_eth_to_wei, to_checksum

logger = logging.getLogger(__name__)


def generate_salt() -> int:
    """Return a fresh 256-bit salt from the OS CSPRNG."""
    return secrets.randbits(256)


def listing_window(duration_minutes: int, now: float | None = None) -> tuple[int, int]:
    """Compute the ``(start_time, end_time)`` of a listing.

    Args:
        duration_minutes: How long the listing stays valid. Must be positive.
        now: Unix timestamp to start from, defaults to the current time.

    Returns:
        tuple[int, int]: Start and end time in seconds since the epoch.

    """
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise OrderBuildError(f"Listing duration must be an integer, got {duration_minutes!r}")
    if duration_minutes <= 0:
        raise OrderBuildError(
            f"Listing duration must be a positive number of minutes, got {duration_minutes}"
        )

    start_time = int(time.time() if now is None else now)
    return start_time, start_time + duration_minutes * 60


def build_order(
    nft: Nft,
    seller_address: str,
    price_eth: str,
    duration_minutes: int,
    counter: int,
    now: float | None = None,
) -> OrderComponents:
    """Derive the Seaport order components for listing one ERC-721 token.

    The seller receives the full price in the native currency; the listing is
    FULL_OPEN with no zone.

    Args:
        nft: The token to list.
        seller_address: The offerer, who also receives the payment.
        price_eth: Listing price as a decimal ETH string (e.g. "0.05").
        duration_minutes: Listing validity in minutes.
        counter: The offerer's current Seaport counter.
        now: Optional start timestamp, defaults to the current time.

    Returns:
        OrderComponents: The unsigned order.

    Raises:
        OrderBuildError: If the price, duration, counter or addresses are invalid.

    """
    price_wei = parse_eth_to_wei(price_eth)
    start_time, end_time = listing_window(duration_minutes, now)

    if counter < 0:
        raise OrderBuildError(f"Counter must not be negative, got {counter}")

    try:
        offerer = to_checksum(seller_address)
        token = to_checksum(nft.contract)
    except ValueError as e:
        raise OrderBuildError(f"Invalid address: {e!s}") from e

    if not (nft.identifier.isascii() and nft.identifier.isdigit()):
        raise OrderBuildError(f"Invalid token identifier: {nft.identifier!r}")
    token_id = int(nft.identifier)

    order = OrderComponents(
        offerer=offerer,
        zone=ZERO_ADDRESS,
        offer=[
            OfferItem(
                item_type=ItemType.ERC721,
                token=token,
                identifier_or_criteria=token_id,
                start_amount=1,
                end_amount=1,
            )
        ],
        consideration=[
            ConsiderationItem(
                item_type=ItemType.NATIVE,
                token=ZERO_ADDRESS,
                identifier_or_criteria=0,
                start_amount=price_wei,
                end_amount=price_wei,
                recipient=offerer,
            )
        ],
        order_type=OrderType.FULL_OPEN,
        start_time=start_time,
        end_time=end_time,
        zone_hash=ZERO_BYTES32,
        salt=generate_salt(),
        conduit_key=OPENSEA_CONDUIT_KEY,
        counter=counter,
    )
    logger.debug(
        f"Built order for token {nft.identifier} of {token}: "
        f"{format_wei_as_eth(price_wei)} ETH, valid {start_time}-{end_time}"
    )
    return order
