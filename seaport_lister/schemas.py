"""Schemas for marketplace responses and Seaport orders."""

from typing import Any

from eth_utils import to_bytes
from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3

from .constants import SEAPORT_CONTRACT_ADDRESS


class Nft(BaseModel):
    """A single NFT as returned by the holdings endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    contract: str = Field(..., description="The NFT contract address")
    identifier: str = Field(..., description="The token ID as a decimal string")
    name: str | None = Field(default=None, description="Optional display name")

    @field_validator("contract")
    @classmethod
    def check_contract(cls, value: str) -> str:
        if not Web3.is_address(value):
            raise ValueError(f"not a valid contract address: {value!r}")
        return value

    @field_validator("identifier", mode="before")
    @classmethod
    def check_identifier(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
            raise ValueError(f"token identifier must be a non-negative integer: {value!r}")
        return value

    @property
    def display_name(self) -> str:
        """Name used in operator messages."""
        return self.name or "NFT"


class AccountNftsResponse(BaseModel):
    """Body of ``GET /chain/{chain}/account/{address}/nfts``.

    Entries are kept raw so malformed items can be dropped one at a time
    instead of discarding the whole page.
    """

    model_config = ConfigDict(extra="ignore")

    nfts: list[Any]
    next: str | None = None


class OfferItem(BaseModel):
    """Offer leg of a Seaport order."""

    model_config = ConfigDict(frozen=True)

    item_type: int
    token: str
    identifier_or_criteria: int
    start_amount: int
    end_amount: int

    def to_message(self) -> dict[str, Any]:
        """Return the EIP-712 form of this item."""
        return {
            "itemType": self.item_type,
            "token": self.token,
            "identifierOrCriteria": self.identifier_or_criteria,
            "startAmount": self.start_amount,
            "endAmount": self.end_amount,
        }

    def to_api(self) -> dict[str, Any]:
        """Return the JSON form of this item."""
        return {
            "itemType": self.item_type,
            "token": self.token,
            "identifierOrCriteria": str(self.identifier_or_criteria),
            "startAmount": str(self.start_amount),
            "endAmount": str(self.end_amount),
        }


class ConsiderationItem(OfferItem):
    """Consideration leg of a Seaport order."""

    recipient: str

    def to_message(self) -> dict[str, Any]:
        return {**super().to_message(), "recipient": self.recipient}

    def to_api(self) -> dict[str, Any]:
        return {**super().to_api(), "recipient": self.recipient}


class OrderComponents(BaseModel):
    """Seaport ``OrderComponents`` for a single listing."""

    model_config = ConfigDict(frozen=True)

    offerer: str
    zone: str
    offer: list[OfferItem]
    consideration: list[ConsiderationItem]
    order_type: int
    start_time: int
    end_time: int
    zone_hash: str
    salt: int
    conduit_key: str
    counter: int

    def to_typed_message(self) -> dict[str, Any]:
        """Return the EIP-712 message, with native ints and bytes32 values."""
        return {
            "offerer": self.offerer,
            "zone": self.zone,
            "offer": [item.to_message() for item in self.offer],
            "consideration": [item.to_message() for item in self.consideration],
            "orderType": self.order_type,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "zoneHash": to_bytes(hexstr=self.zone_hash),
            "salt": self.salt,
            "conduitKey": to_bytes(hexstr=self.conduit_key),
            "counter": self.counter,
        }

    def to_api_parameters(self) -> dict[str, Any]:
        """Return the JSON form expected by the listing API."""
        return {
            "offerer": self.offerer,
            "zone": self.zone,
            "offer": [item.to_api() for item in self.offer],
            "consideration": [item.to_api() for item in self.consideration],
            "orderType": self.order_type,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "zoneHash": self.zone_hash,
            "salt": str(self.salt),
            "conduitKey": self.conduit_key,
            "totalOriginalConsiderationItems": len(self.consideration),
            "counter": str(self.counter),
        }


class SignedOrder(BaseModel):
    """An order together with its EIP-712 signature."""

    model_config = ConfigDict(frozen=True)

    order: OrderComponents
    signature: str

    def to_payload(self, protocol_address: str = SEAPORT_CONTRACT_ADDRESS) -> dict[str, Any]:
        """Build the body for ``POST /listings``."""
        return {
            "parameters": {
                **self.order.to_api_parameters(),
                "signature": self.signature,
            },
            "protocol_address": protocol_address,
        }
