from unittest.mock import MagicMock

import pytest

from seaport_lister.config import ListerConfig
from seaport_lister.listing_log import ListingLog
from seaport_lister.opensea_client import OpenSeaClient
from seaport_lister.schemas import Nft
from seaport_lister.signer import WalletSigner

# Well-known development keys (Hardhat accounts #0 and #1), never funded on mainnet
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
SECOND_PRIVATE_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
SECOND_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

TARGET_CONTRACT = "0x341444b4b6c1d2fc9897fe578361880dd3f77cf5"
OTHER_CONTRACT = "0x2ae3f1ec7f1f5012cfeab0185bfc7aa3cf0dec22"


def make_response(status_code: int = 200, body=None, reason: str = "OK"):
    """Create a mock ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    if isinstance(body, (dict, list)):
        response.json.return_value = body
        response.text = str(body)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = body or ""
    return response


@pytest.fixture
def target_nft():
    """An NFT from the target collection."""
    return Nft(contract=TARGET_CONTRACT, identifier="42", name="Test NFT #42")


@pytest.fixture
def lister_config(tmp_path):
    """A valid single-wallet configuration."""
    return ListerConfig(
        api_key="test-api-key",
        rpc_url="http://localhost:8545",
        target_contract_address=TARGET_CONTRACT,
        listing_price_eth="0.05",
        listing_duration_minutes=60,
        wallets=(TEST_ADDRESS,),
        private_keys=(TEST_PRIVATE_KEY,),
        listing_delay_seconds=0,
        log_file=str(tmp_path / "listing_log.txt"),
    )


@pytest.fixture
def two_wallet_config(lister_config):
    """A valid configuration with two wallets."""
    return lister_config.model_copy(
        update={
            "wallets": (TEST_ADDRESS, SECOND_ADDRESS),
            "private_keys": (TEST_PRIVATE_KEY, SECOND_PRIVATE_KEY),
        }
    )


@pytest.fixture
def listing_log(tmp_path):
    """A listing log writing into the test's temp directory."""
    return ListingLog(tmp_path / "listing_log.txt")


@pytest.fixture
def mock_signer():
    """Create a mock signer that never touches the network."""
    signer = MagicMock(spec=WalletSigner)
    signer.address = TEST_ADDRESS
    signer.get_counter.return_value = 0
    signer.sign_typed_data.return_value = "0x" + "ab" * 65
    signer.is_approved_for_all.return_value = True
    return signer


@pytest.fixture
def mock_client():
    """Create a mock OpenSea client."""
    client = MagicMock(spec=OpenSeaClient)
    client.post_listing.return_value = {"order_hash": "0xhash"}
    return client


@pytest.fixture
def mock_session():
    """Create a mock ``requests.Session`` for the real client."""
    session = MagicMock()
    session.headers = {}
    return session
