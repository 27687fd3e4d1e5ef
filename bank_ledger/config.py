"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Ledger file configuration."""

    data_file: Path = field(default_factory=lambda: Path("bank.json"))
    pretty_json: bool = False


@dataclass
class AuthConfig:
    """Shared-secret configuration."""

    secret: str = "matrix"


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if not self.auth.secret:
            raise ConfigurationError("Shared secret must not be empty")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        storage = StorageConfig(
            data_file=Path(os.getenv("BANK_LEDGER_DATA_FILE", "bank.json")),
            pretty_json=os.getenv("BANK_LEDGER_PRETTY_JSON", "false").lower() == "true",
        )

        auth = AuthConfig(secret=os.getenv("BANK_LEDGER_SECRET", "matrix"))

        return cls(
            storage=storage,
            auth=auth,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
