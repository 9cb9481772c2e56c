"""Utility functions for the Seaport batch lister."""

from decimal import Decimal, InvalidOperation, localcontext

from web3 import Web3

from .constants import CHAIN, ETH_DECIMALS, OPENSEA_ASSET_URL
from .errors import OrderBuildError


def parse_eth_to_wei(amount: str, decimals: int = ETH_DECIMALS) -> int:
    """Convert a human-readable ETH amount to wei without losing precision.

    Args:
        amount: The amount as a decimal string (e.g. "0.1").
        decimals: The number of decimals of the native currency.

    Returns:
        int: The amount in wei.

    Raises:
        OrderBuildError: If the amount is malformed, not positive, or has more
            fractional digits than the currency supports.

    """
    try:
        amount_decimal = Decimal(amount.strip())
    except (InvalidOperation, AttributeError) as e:
        raise OrderBuildError(f"Invalid amount format: {amount!r}") from e

    if not amount_decimal.is_finite():
        raise OrderBuildError(f"Invalid amount format: {amount!r}")
    if amount_decimal <= 0:
        raise OrderBuildError(f"Amount must be positive: {amount!r}")

    with localcontext() as ctx:
        ctx.prec = 100
        scaled = amount_decimal.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise OrderBuildError(
            f"Amount {amount!r} has more than {decimals} decimal places and cannot be "
            "represented in wei"
        )
    return int(scaled)


def format_wei_as_eth(amount: int, decimals: int = ETH_DECIMALS) -> str:
    """Format a wei amount as a plain decimal ETH string.

    Args:
        amount: The amount in wei.
        decimals: The number of decimals of the native currency.

    Returns:
        str: The amount as a human-readable string, without trailing zeros.

    """
    with localcontext() as ctx:
        ctx.prec = 100
        value = Decimal(amount).scaleb(-decimals)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def same_address(left: str, right: str) -> bool:
    """Compare two hex addresses case-insensitively."""
    return left.strip().lower() == right.strip().lower()


def to_checksum(address: str) -> str:
    """Return the EIP-55 checksum form of an address."""
    return Web3.to_checksum_address(address.strip())


def asset_url(contract: str, identifier: str) -> str:
    """Build the OpenSea page link for a single token."""
    return f"{OPENSEA_ASSET_URL}/{CHAIN}/{contract}/{identifier}"
