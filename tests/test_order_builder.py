import time

import pytest
from web3 import Web3

from conftest import TARGET_CONTRACT, TEST_ADDRESS
from seaport_lister.constants import (
    OPENSEA_CONDUIT_KEY,
    SEAPORT_CONTRACT_ADDRESS,
    ZERO_ADDRESS,
    ZERO_BYTES32,
    ItemType,
    OrderType,
)
from seaport_lister.errors import OrderBuildError
from seaport_lister.order_builder import build_order, listing_window
from seaport_lister.schemas import Nft, SignedOrder


def test_build_order_structure(target_nft):
    """Test that the order carries one ERC721 offer and one native consideration."""
    order = build_order(target_nft, TEST_ADDRESS.lower(), "0.05", 60, counter=3, now=1_700_000_000)

    assert order.offerer == TEST_ADDRESS
    assert order.zone == ZERO_ADDRESS
    assert order.order_type == OrderType.FULL_OPEN
    assert order.zone_hash == ZERO_BYTES32
    assert order.conduit_key == OPENSEA_CONDUIT_KEY
    assert order.counter == 3

    [offer] = order.offer
    assert offer.item_type == ItemType.ERC721
    assert offer.token == Web3.to_checksum_address(TARGET_CONTRACT)
    assert offer.identifier_or_criteria == 42
    assert offer.start_amount == offer.end_amount == 1

    [consideration] = order.consideration
    assert consideration.item_type == ItemType.NATIVE
    assert consideration.token == ZERO_ADDRESS
    assert consideration.identifier_or_criteria == 0
    assert consideration.start_amount == consideration.end_amount == 5 * 10**16
    assert consideration.recipient == TEST_ADDRESS


def test_build_order_timing(target_nft):
    """Test that the validity window spans exactly the configured duration."""
    before = time.time()
    order = build_order(target_nft, TEST_ADDRESS, "1", 90, counter=0)
    after = time.time()

    assert order.end_time - order.start_time == 90 * 60
    assert int(before) <= order.start_time <= int(after) + 1


def test_build_order_fresh_salt(target_nft):
    """Test that two identical builds get different salts."""
    first = build_order(target_nft, TEST_ADDRESS, "1", 60, counter=0, now=1_700_000_000)
    second = build_order(target_nft, TEST_ADDRESS, "1", 60, counter=0, now=1_700_000_000)

    assert first.salt != second.salt
    assert 0 <= first.salt < 2**256


@pytest.mark.parametrize("duration", [0, -1])
def test_build_order_rejects_non_positive_duration(target_nft, duration):
    """Test that zero and negative durations are reported, not clamped."""
    with pytest.raises(OrderBuildError, match="positive"):
        build_order(target_nft, TEST_ADDRESS, "1", duration, counter=0)


def test_build_order_rejects_excess_price_precision(target_nft):
    """Test that sub-wei prices fail the build."""
    with pytest.raises(OrderBuildError, match="decimal places"):
        build_order(target_nft, TEST_ADDRESS, "0.0000000000000000001", 60, counter=0)


def test_build_order_rejects_bad_seller(target_nft):
    """Test that an invalid seller address fails the build."""
    with pytest.raises(OrderBuildError, match="Invalid address"):
        build_order(target_nft, "0xnot-an-address", "1", 60, counter=0)


def test_listing_window_rejects_non_integer():
    """Test that fractional durations are rejected."""
    with pytest.raises(OrderBuildError, match="integer"):
        listing_window(1.5)


def test_typed_message_uses_native_values(target_nft):
    """Test the EIP-712 message form of the order."""
    order = build_order(target_nft, TEST_ADDRESS, "0.05", 60, counter=7, now=1_700_000_000)

    message = order.to_typed_message()

    assert message["startTime"] == 1_700_000_000
    assert message["endTime"] == 1_700_003_600
    assert message["salt"] == order.salt
    assert message["counter"] == 7
    assert message["zoneHash"] == b"\x00" * 32
    assert isinstance(message["conduitKey"], bytes) and len(message["conduitKey"]) == 32
    assert message["offer"][0]["identifierOrCriteria"] == 42
    assert message["consideration"][0]["recipient"] == TEST_ADDRESS


def test_listing_payload_shape(target_nft):
    """Test the JSON body posted to the listing endpoint."""
    order = build_order(target_nft, TEST_ADDRESS, "0.05", 60, counter=0, now=1_700_000_000)

    payload = SignedOrder(order=order, signature="0xsig").to_payload()

    assert payload["protocol_address"] == SEAPORT_CONTRACT_ADDRESS
    parameters = payload["parameters"]
    assert parameters["signature"] == "0xsig"
    assert parameters["offerer"] == TEST_ADDRESS
    assert parameters["salt"] == str(order.salt)
    assert parameters["counter"] == "0"
    assert parameters["startTime"] == 1_700_000_000
    assert parameters["totalOriginalConsiderationItems"] == 1
    assert parameters["offer"][0]["identifierOrCriteria"] == "42"
    assert parameters["consideration"][0]["startAmount"] == str(5 * 10**16)


def test_build_order_rejects_non_ascii_identifier():
    """Test that an identifier that bypassed validation fails the build, not the run."""
    nft = Nft.model_construct(contract=TARGET_CONTRACT, identifier="²", name=None)

    with pytest.raises(OrderBuildError, match="Invalid token identifier"):
        build_order(nft, TEST_ADDRESS, "1", 60, counter=0)
