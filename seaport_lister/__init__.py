"""Batch listing of ERC-721 tokens on OpenSea through signed Seaport orders."""

from .config import ListerConfig, WalletCredential, load_config
from .errors import (
    ConfigurationError,
    HoldingsQueryError,
    ListingSubmissionError,
    OrderBuildError,
    SeaportListerError,
    SigningError,
)
from .order_builder import build_order
from .orchestrator import RunSummary, WalletReport, run_batch
from .signer import WalletSigner, derive_signer
from .submitter import ListingResult, list_nft, submit_listing

__all__ = [
    "ConfigurationError",
    "HoldingsQueryError",
    "ListerConfig",
    "ListingResult",
    "ListingSubmissionError",
    "OrderBuildError",
    "RunSummary",
    "SeaportListerError",
    "SigningError",
    "WalletCredential",
    "WalletReport",
    "WalletSigner",
    "build_order",
    "derive_signer",
    "list_nft",
    "load_config",
    "run_batch",
    "submit_listing",
]
