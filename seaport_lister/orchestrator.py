"""Sequential multi-wallet listing loop."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .config import ListerConfig, WalletCredential
from .constants import OPENSEA_CONDUIT_ADDRESS
from .errors import HoldingsQueryError, SigningError
from .listing_log import ListingLog
from .opensea_client import OpenSeaClient
from .schemas import Nft
from .signer import WalletSigner, derive_signer
from .submitter import ListingResult, list_nft
from .utils import same_address

logger = logging.getLogger(__name__)


@dataclass
class WalletReport:
    """What happened to one wallet during a run."""

    index: int
    address: str
    matched: int = 0
    results: list[ListingResult] = field(default_factory=list)
    error: str | None = None

    @property
    def skipped(self) -> bool:
        return self.error is not None

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.success)


@dataclass
class RunSummary:
    """Aggregate of all wallet reports for a run."""

    wallets: list[WalletReport] = field(default_factory=list)

    @property
    def wallets_processed(self) -> int:
        return sum(1 for report in self.wallets if not report.skipped)

    @property
    def wallets_skipped(self) -> int:
        return sum(1 for report in self.wallets if report.skipped)

    @property
    def listings_succeeded(self) -> int:
        return sum(report.succeeded for report in self.wallets)

    @property
    def listings_failed(self) -> int:
        return sum(report.failed for report in self.wallets)

    def describe(self) -> str:
        """One-line summary for the operator."""
        return (
            f"{self.wallets_processed}/{len(self.wallets)} wallets processed, "
            f"{self.wallets_skipped} skipped; "
            f"{self.listings_succeeded} listed, {self.listings_failed} failed"
        )


def filter_target_nfts(nfts: list[Nft], target_contract: str) -> list[Nft]:
    """Keep the NFTs of ``target_contract``, matching addresses case-insensitively."""
    return [nft for nft in nfts if same_address(nft.contract, target_contract)]


def process_wallet(
    index: int,
    credential: WalletCredential,
    config: ListerConfig,
    client: OpenSeaClient,
    listing_log: ListingLog,
    sleep: Callable[[float], None] = time.sleep,
) -> WalletReport:
    """List every target-collection NFT held by one wallet.

    A key that does not control the wallet address, or a failed holdings
    query, skips the wallet; a failed listing skips only that token.

    Args:
        index: Zero-based position of the wallet in the run.
        credential: The wallet address and key.
        config: The run configuration.
        client: The OpenSea API client.
        listing_log: Sink for operator and log output.
        sleep: Delay function between submissions.

    Returns:
        WalletReport: Per-token results, or the reason the wallet was skipped.

    """
    report = WalletReport(index=index, address=credential.address)
    signer = derive_signer(credential.private_key, config.rpc_url)

    try:
        derived_address = signer.address
    except SigningError as e:
        report.error = str(e)
        listing_log.record(
            f"Cannot use wallet {credential.address}. Reason: {e!s}. Skipping wallet.", error=True
        )
        return report
    if not same_address(derived_address, credential.address):
        report.error = f"Private key belongs to {derived_address}, not {credential.address}"
        listing_log.record(
            f"Cannot use wallet {credential.address}. Reason: {report.error}. "
            "Check that WALLETS and PRIVATE_KEYS are in the same order. Skipping wallet.",
            error=True,
        )
        return report

    try:
        nfts = client.get_account_nfts(credential.address)
    except HoldingsQueryError as e:
        report.error = str(e)
        listing_log.record(
            f"Failed to fetch NFTs from wallet {credential.address}. Reason: {e!s}", error=True
        )
        return report

    targets = filter_target_nfts(nfts, config.target_contract_address)
    report.matched = len(targets)
    if not targets:
        listing_log.record("No NFTs from the target contract found.")
        return report

    listing_log.record(
        f"Found {len(targets)} NFTs from the target contract. Starting listing process..."
    )

    if config.check_approval:
        _warn_if_not_approved(signer, config.target_contract_address, listing_log)

    for nft in targets:
        report.results.append(list_nft(signer, nft, config, client, listing_log))
        sleep(config.listing_delay_seconds)

    return report


def _warn_if_not_approved(
    signer: WalletSigner, contract_address: str, listing_log: ListingLog
) -> None:
    try:
        approved = signer.is_approved_for_all(contract_address, OPENSEA_CONDUIT_ADDRESS)
    except SigningError as e:
        logger.warning(f"Could not check conduit approval: {e!s}")
        return
    if not approved:
        listing_log.record(
            f"WARNING: OpenSea conduit is not approved for {contract_address}; "
            "listings will not be fillable until setApprovalForAll is sent.",
            error=True,
        )


def run_batch(
    config: ListerConfig,
    client: OpenSeaClient | None = None,
    listing_log: ListingLog | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunSummary:
    """Process every configured wallet in order.

    Args:
        config: The run configuration.
        client: OpenSea client, built from ``config`` if omitted.
        listing_log: Log sink, built from ``config.log_file`` if omitted.
        sleep: Delay function between submissions.

    Returns:
        RunSummary: Outcomes of every wallet and token.

    """
    client = client or OpenSeaClient(
        config.api_key, base_url=config.api_base_url, timeout=config.request_timeout
    )
    listing_log = listing_log or ListingLog(config.log_file)

    credentials = config.credentials
    total = len(credentials)
    listing_log.record(f"--- Starting NFT listing process for {total} wallets. ---")

    summary = RunSummary()
    for index, credential in enumerate(credentials):
        listing_log.record(
            "\n=========================================\n"
            f"Processing wallet {index + 1}/{total}: {credential.address}\n"
            "========================================="
        )
        summary.wallets.append(
            process_wallet(index, credential, config, client, listing_log, sleep=sleep)
        )

    listing_log.record(f"--- Process finished: {summary.describe()}. ---")
    listing_log.record(f"Check {listing_log.path} for a full report.")
    return summary
