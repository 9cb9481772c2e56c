"""Constants for the Seaport batch lister."""

from typing import TypedDict

OPENSEA_API_BASE_URL = "https://api.opensea.io/v2"
OPENSEA_ASSET_URL = "https://opensea.io/assets"

# Single fixed chain configuration
CHAIN = "base"
CHAIN_ID = 8453

SEAPORT_CONTRACT_NAME = "Seaport"
SEAPORT_CONTRACT_VERSION = "1.5"
SEAPORT_CONTRACT_ADDRESS = "0x00000000000001ad428e4906ae43d8f9852d0dd6"

# OpenSea's conduit, the transfer proxy approved to move listed NFTs
OPENSEA_CONDUIT_ADDRESS = "0x1E0049783F008A0085193E00003D00cd54003c71"
OPENSEA_CONDUIT_KEY = "0x0000007b02230091a7ed01230072f7006a004d60a8d4e71d599b8104250f0000"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_BYTES32 = "0x0000000000000000000000000000000000000000000000000000000000000000"

ETH_DECIMALS = 18
DEFAULT_LISTING_DELAY_SECONDS = 2.0
DEFAULT_LOG_FILE = "listing_log.txt"
DEFAULT_REQUEST_TIMEOUT = 30


class OrderType:
    """Seaport order types."""

    FULL_OPEN = 0  # No partial fills, anyone can execute
    PARTIAL_OPEN = 1  # Partial fills supported, anyone can execute
    FULL_RESTRICTED = 2  # No partial fills, only approved can execute
    PARTIAL_RESTRICTED = 3  # Partial fills supported, only approved can execute


class ItemType:
    """Seaport item types for offer/consideration legs."""

    NATIVE = 0
    ERC20 = 1
    ERC721 = 2
    ERC1155 = 3
    ERC721_WITH_CRITERIA = 4
    ERC1155_WITH_CRITERIA = 5


class Eip712Domain(TypedDict):
    """EIP-712 domain fields used by Seaport."""

    name: str
    version: str
    chainId: int
    verifyingContract: str


SEAPORT_DOMAIN: Eip712Domain = {
    "name": SEAPORT_CONTRACT_NAME,
    "version": SEAPORT_CONTRACT_VERSION,
    "chainId": CHAIN_ID,
    "verifyingContract": SEAPORT_CONTRACT_ADDRESS,
}

# EIP-712 type definitions, must match Seaport's type strings exactly
EIP_712_ORDER_TYPE = {
    "OrderComponents": [
        {"name": "offerer", "type": "address"},
        {"name": "zone", "type": "address"},
        {"name": "offer", "type": "OfferItem[]"},
        {"name": "consideration", "type": "ConsiderationItem[]"},
        {"name": "orderType", "type": "uint8"},
        {"name": "startTime", "type": "uint256"},
        {"name": "endTime", "type": "uint256"},
        {"name": "zoneHash", "type": "bytes32"},
        {"name": "salt", "type": "uint256"},
        {"name": "conduitKey", "type": "bytes32"},
        {"name": "counter", "type": "uint256"},
    ],
    "OfferItem": [
        {"name": "itemType", "type": "uint8"},
        {"name": "token", "type": "address"},
        {"name": "identifierOrCriteria", "type": "uint256"},
        {"name": "startAmount", "type": "uint256"},
        {"name": "endAmount", "type": "uint256"},
    ],
    "ConsiderationItem": [
        {"name": "itemType", "type": "uint8"},
        {"name": "token", "type": "address"},
        {"name": "identifierOrCriteria", "type": "uint256"},
        {"name": "startAmount", "type": "uint256"},
        {"name": "endAmount", "type": "uint256"},
        {"name": "recipient", "type": "address"},
    ],
}

# Minimal Seaport ABI for reading the offerer counter
SEAPORT_ABI = [
    {
        "inputs": [{"name": "offerer", "type": "address"}],
        "name": "getCounter",
        "outputs": [{"name": "counter", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

ERC721_ABI = [
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "operator", "type": "address"},
        ],
        "name": "isApprovedForAll",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
]
