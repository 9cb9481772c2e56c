"""Process configuration for the Seaport batch lister."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from web3 import Web3

from .constants import (
    DEFAULT_LISTING_DELAY_SECONDS,
    DEFAULT_LOG_FILE,
    DEFAULT_REQUEST_TIMEOUT,
    OPENSEA_API_BASE_URL,
)
from .errors import ConfigurationError, OrderBuildError
from .utils import parse_eth_to_wei

REQUIRED_ENV_VARS = [
    "OPENSEA_API_KEY",
    "RPC_URL",
    "TARGET_CONTRACT_ADDRESS",
    "LISTING_PRICE_IN_ETH",
    "LISTING_DURATION_MINUTES",
    "WALLETS",
    "PRIVATE_KEYS",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class WalletCredential:
    """One wallet address with the key that controls it."""

    address: str
    private_key: str = field(repr=False)


class ListerConfig(BaseModel):
    """Immutable settings for one listing run."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, repr=False)
    rpc_url: str = Field(..., min_length=1)
    target_contract_address: str
    listing_price_eth: str
    listing_duration_minutes: int = Field(..., gt=0)
    wallets: tuple[str, ...]
    private_keys: tuple[str, ...] = Field(..., repr=False)

    api_base_url: str = OPENSEA_API_BASE_URL
    listing_delay_seconds: float = Field(default=DEFAULT_LISTING_DELAY_SECONDS, ge=0)
    log_file: str = DEFAULT_LOG_FILE
    check_approval: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)

    @field_validator("target_contract_address")
    @classmethod
    def check_target(cls, value: str) -> str:
        value = value.strip()
        if not Web3.is_address(value):
            raise ValueError(f"TARGET_CONTRACT_ADDRESS is not a valid address: {value!r}")
        return value

    @field_validator("listing_price_eth")
    @classmethod
    def check_price(cls, value: str) -> str:
        value = value.strip()
        try:
            parse_eth_to_wei(value)
        except OrderBuildError as e:
            raise ValueError(f"LISTING_PRICE_IN_ETH is invalid: {e!s}") from e
        return value

    @field_validator("wallets")
    @classmethod
    def check_wallets(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        invalid = [wallet for wallet in value if not Web3.is_address(wallet)]
        if invalid:
            raise ValueError(f"WALLETS contains invalid addresses: {', '.join(invalid)}")
        return value

    @model_validator(mode="after")
    def check_wallet_keys(self) -> "ListerConfig":
        if not self.wallets:
            raise ValueError("No wallet addresses configured.")
        if len(self.wallets) != len(self.private_keys):
            raise ValueError(
                f"The number of wallet addresses ({len(self.wallets)}) does not match "
                f"the number of private keys ({len(self.private_keys)})."
            )
        return self

    @property
    def credentials(self) -> list[WalletCredential]:
        """Wallets paired with their private keys, in configured order."""
        return [
            WalletCredential(address=address, private_key=key)
            for address, key in zip(self.wallets, self.private_keys, strict=True)
        ]


def split_lines(value: str) -> tuple[str, ...]:
    """Split a newline-delimited setting, trimming and dropping blank lines."""
    return tuple(line.strip() for line in value.splitlines() if line.strip())


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


def load_config(environ: Mapping[str, str] | None = None) -> ListerConfig:
    """Build the run configuration from environment variables.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``.

    Returns:
        ListerConfig: The validated configuration.

    Raises:
        ConfigurationError: If a required variable is missing or any check fails.

    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name, "").strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    duration = env["LISTING_DURATION_MINUTES"].strip()
    try:
        duration_minutes = int(duration)
    except ValueError as e:
        raise ConfigurationError(
            f"LISTING_DURATION_MINUTES must be an integer number of minutes, got {duration!r}"
        ) from e

    options: dict[str, object] = {}
    if env.get("OPENSEA_API_BASE_URL", "").strip():
        options["api_base_url"] = env["OPENSEA_API_BASE_URL"].strip()
    if env.get("LISTING_DELAY_SECONDS", "").strip():
        options["listing_delay_seconds"] = env["LISTING_DELAY_SECONDS"].strip()
    if env.get("LISTING_LOG_FILE", "").strip():
        options["log_file"] = env["LISTING_LOG_FILE"].strip()
    if env.get("CHECK_CONDUIT_APPROVAL", "").strip():
        flag = env["CHECK_CONDUIT_APPROVAL"].strip().lower()
        if flag not in _TRUE_VALUES | _FALSE_VALUES:
            raise ConfigurationError(
                f"CHECK_CONDUIT_APPROVAL must be one of true/false, yes/no, on/off or 1/0, got {flag!r}"
            )
        options["check_approval"] = flag in _TRUE_VALUES
    if env.get("LOG_LEVEL", "").strip():
        options["log_level"] = env["LOG_LEVEL"].strip().upper()

    try:
        return ListerConfig(
            api_key=env["OPENSEA_API_KEY"].strip(),
            rpc_url=env["RPC_URL"].strip(),
            target_contract_address=env["TARGET_CONTRACT_ADDRESS"],
            listing_price_eth=env["LISTING_PRICE_IN_ETH"],
            listing_duration_minutes=duration_minutes,
            wallets=split_lines(env["WALLETS"]),
            private_keys=split_lines(env["PRIVATE_KEYS"]),
            **options,
        )
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e
