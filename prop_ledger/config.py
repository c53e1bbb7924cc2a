"""Configuration management for prop-ledger."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from prop_ledger.exceptions import ConfigurationError

if TYPE_CHECKING:
    from prop_ledger.store.backends import KeyValueBackend

BACKENDS = ("json", "memory")


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class StorageConfig:
    """Persistent store configuration."""

    backend: str = "json"
    data_dir: Path = field(default_factory=lambda: Path("data"))
    pretty_json: bool = False

    def build_backend(self) -> "KeyValueBackend":
        """Instantiate the configured key-value backend."""
        from prop_ledger.store.backends import InMemoryBackend, JsonDirectoryBackend

        if self.backend == "memory":
            return InMemoryBackend()
        if self.backend == "json":
            return JsonDirectoryBackend(self.data_dir)
        raise ConfigurationError(
            f"Unknown storage backend {self.backend!r}, expected one of {', '.join(BACKENDS)}"
        )


@dataclass
class LedgerConfig:
    """Main configuration for prop-ledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    seed_demo: bool = True
    validate_records: bool = True
    strict_missing: bool = False
    family_support_rate: float = 0.10
    chronological_months: bool = True
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.family_support_rate <= 1:
            raise ConfigurationError(
                f"family_support_rate must be within [0, 1], got {self.family_support_rate}"
            )

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            backend=os.getenv("LEDGER_BACKEND", "json"),
            data_dir=Path(os.getenv("LEDGER_DATA_DIR", "data")),
            pretty_json=_env_flag(os.getenv("LEDGER_PRETTY_JSON"), False),
        )

        rate = os.getenv("LEDGER_FAMILY_SUPPORT_RATE", "0.10")
        try:
            family_support_rate = float(rate)
        except ValueError as exc:
            raise ConfigurationError(f"LEDGER_FAMILY_SUPPORT_RATE is not a number: {rate!r}") from exc

        return cls(
            storage=storage,
            seed_demo=_env_flag(os.getenv("LEDGER_SEED_DEMO"), True),
            validate_records=_env_flag(os.getenv("LEDGER_VALIDATE"), True),
            strict_missing=_env_flag(os.getenv("LEDGER_STRICT_MISSING"), False),
            family_support_rate=family_support_rate,
            chronological_months=_env_flag(os.getenv("LEDGER_CHRONOLOGICAL"), True),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
        )
