"""Wallet signer: address derivation, EIP-712 signing and Seaport state reads."""

import logging
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_account.signers.local import LocalAccount
from eth_utils import to_hex
from web3 import Web3

from .constants import ERC721_ABI, SEAPORT_ABI, SEAPORT_CONTRACT_ADDRESS
from .errors import SigningError

logger = logging.getLogger(__name__)


class WalletSigner:
    """Signs Seaport orders for a single wallet.

    The account is derived from the private key on first use, so a malformed
    key surfaces as a ``SigningError`` when the signer is actually needed.

    Args:
        private_key: Hex-encoded private key, with or without ``0x``.
        rpc_url: JSON-RPC endpoint used for on-chain reads.

    """

    def __init__(self, private_key: str, rpc_url: str):
        self._private_key = private_key
        self._rpc_url = rpc_url
        self._account: LocalAccount | None = None
        self._web3: Web3 | None = None

    def __repr__(self) -> str:
        return f"WalletSigner(rpc_url={self._rpc_url!r})"

    @property
    def account(self) -> LocalAccount:
        """The local account derived from the private key."""
        if self._account is None:
            try:
                self._account = Account.from_key(self._private_key)
            except Exception as e:
                # Never echo the key itself
                raise SigningError(f"Invalid private key: {type(e).__name__}") from e
        return self._account

    @property
    def address(self) -> str:
        """Checksum address of the wallet."""
        return self.account.address

    @property
    def web3(self) -> Web3:
        """Web3 client bound to the configured RPC endpoint."""
        if self._web3 is None:
            self._web3 = Web3(Web3.HTTPProvider(self._rpc_url))
        return self._web3

    def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> str:
        """Sign EIP-712 typed data.

        Args:
            domain: The EIP-712 domain (name, version, chainId, verifyingContract).
            types: The message types, without ``EIP712Domain``.
            message: The message to sign.

        Returns:
            str: The ``0x``-prefixed 65-byte signature.

        Raises:
            SigningError: If the key is invalid or the data cannot be encoded.

        """
        account = self.account
        try:
            signable = encode_typed_data(
                domain_data=domain, message_types=types, message_data=message
            )
            signed = account.sign_message(signable)
        except Exception as e:
            raise SigningError(f"Failed to sign typed data: {e!s}") from e

        signature = to_hex(signed.signature)
        logger.debug(f"Signature created for {account.address}: {signature[:10]}...")
        return signature

    def get_counter(self, seaport_address: str = SEAPORT_CONTRACT_ADDRESS) -> int:
        """Read the offerer's current Seaport counter.

        Args:
            seaport_address: The Seaport contract to query.

        Returns:
            int: The counter orders must be signed under.

        """
        try:
            seaport = self.web3.eth.contract(
                address=Web3.to_checksum_address(seaport_address), abi=SEAPORT_ABI
            )
            counter = seaport.functions.getCounter(self.address).call()
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(f"Failed to read Seaport counter: {e!s}") from e
        return int(counter)

    def is_approved_for_all(self, contract_address: str, operator: str) -> bool:
        """Check if ``operator`` may transfer this wallet's tokens of ``contract_address``."""
        try:
            nft_contract = self.web3.eth.contract(
                address=Web3.to_checksum_address(contract_address), abi=ERC721_ABI
            )
            approved = nft_contract.functions.isApprovedForAll(
                self.address, Web3.to_checksum_address(operator)
            ).call()
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(f"Failed to read approval status: {e!s}") from e
        return bool(approved)


def derive_signer(private_key: str, rpc_url: str) -> WalletSigner:
    """Create a signer for one wallet.

    Args:
        private_key: Hex-encoded private key.
        rpc_url: JSON-RPC endpoint for on-chain reads.

    Returns:
        WalletSigner: A signer; nothing is validated until it is used.

    """
    return WalletSigner(private_key, rpc_url)
