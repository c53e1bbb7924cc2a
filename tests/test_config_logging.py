"""Tests for config and logging."""

import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from prop_ledger.config import LedgerConfig, StorageConfig
from prop_ledger.exceptions import ConfigurationError
from prop_ledger.logging import CollectionLogAdapter, JsonFormatter, get_logger, setup_logging
from prop_ledger.store import InMemoryBackend, JsonDirectoryBackend, StorageGateway

ENV_VARS = [
    "LEDGER_BACKEND",
    "LEDGER_DATA_DIR",
    "LEDGER_PRETTY_JSON",
    "LEDGER_SEED_DEMO",
    "LEDGER_VALIDATE",
    "LEDGER_STRICT_MISSING",
    "LEDGER_FAMILY_SUPPORT_RATE",
    "LEDGER_CHRONOLOGICAL",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED",
]


@pytest.fixture
def clean_env():
    """Run with every config variable unset."""
    cleared = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, cleared, clear=True):
        yield


class TestStorageConfig:
    """Tests for StorageConfig."""

    def test_default_values(self) -> None:
        config = StorageConfig()

        assert config.backend == "json"
        assert config.data_dir == Path("data")
        assert config.pretty_json is False

    def test_build_memory_backend(self) -> None:
        assert isinstance(StorageConfig(backend="memory").build_backend(), InMemoryBackend)

    def test_build_json_backend(self, tmp_path: Path) -> None:
        backend = StorageConfig(backend="json", data_dir=tmp_path).build_backend()

        assert isinstance(backend, JsonDirectoryBackend)
        assert backend.data_dir == tmp_path

    def test_unknown_backend(self) -> None:
        with pytest.raises(ConfigurationError, match="redis"):
            StorageConfig(backend="redis").build_backend()


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert isinstance(config.storage, StorageConfig)
        assert config.seed_demo is True
        assert config.validate_records is True
        assert config.strict_missing is False
        assert config.family_support_rate == 0.10
        assert config.chronological_months is True
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_rate_out_of_range(self) -> None:
        with pytest.raises(ConfigurationError, match="family_support_rate"):
            LedgerConfig(family_support_rate=1.5)

    def test_from_env_default(self, clean_env: None) -> None:
        config = LedgerConfig.from_env()

        assert config.storage.backend == "json"
        assert config.storage.data_dir == Path("data")
        assert config.seed_demo is True
        assert config.family_support_rate == 0.10
        assert config.seed is None

    def test_from_env_custom(self, clean_env: None) -> None:
        env = {
            "LEDGER_BACKEND": "memory",
            "LEDGER_DATA_DIR": "/var/lib/ledger",
            "LEDGER_PRETTY_JSON": "true",
            "LEDGER_SEED_DEMO": "false",
            "LEDGER_VALIDATE": "0",
            "LEDGER_STRICT_MISSING": "yes",
            "LEDGER_FAMILY_SUPPORT_RATE": "0.15",
            "LEDGER_CHRONOLOGICAL": "off",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
            "SEED": "12345",
        }

        with patch.dict(os.environ, env):
            config = LedgerConfig.from_env()

        assert config.storage.backend == "memory"
        assert config.storage.data_dir == Path("/var/lib/ledger")
        assert config.storage.pretty_json is True
        assert config.seed_demo is False
        assert config.validate_records is False
        assert config.strict_missing is True
        assert config.family_support_rate == 0.15
        assert config.chronological_months is False
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 12345

    def test_from_env_bad_rate(self, clean_env: None) -> None:
        with patch.dict(os.environ, {"LEDGER_FAMILY_SUPPORT_RATE": "ten percent"}):
            with pytest.raises(ConfigurationError, match="not a number"):
                LedgerConfig.from_env()

    def test_gateway_from_config(self) -> None:
        gateway = StorageGateway.from_config(LedgerConfig(storage=StorageConfig(backend="memory")))

        assert isinstance(gateway.backend, InMemoryBackend)
        assert len(gateway.apartments.get_all()) == 2


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("prop_ledger").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            import sys

            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"collection": "tenants"}

        data = json.loads(JsonFormatter().format(record))

        assert data["collection"] == "tenants"


class TestGetLogger:
    """Tests for get_logger and the collection adapter."""

    def test_plain_logger(self) -> None:
        logger = get_logger("prop_ledger.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "prop_ledger.test"

    def test_collection_adapter(self, caplog: pytest.LogCaptureFixture) -> None:
        adapter = get_logger("prop_ledger.test", collection="tenants")
        assert isinstance(adapter, CollectionLogAdapter)

        with caplog.at_level(logging.INFO, logger="prop_ledger.test"):
            adapter.info("Added %s", "t1")

        record = caplog.records[-1]
        assert record.getMessage() == "[tenants] Added t1"
        assert record.extra == {"collection": "tenants"}

    def test_gateway_warns_on_missing_id(self, caplog: pytest.LogCaptureFixture) -> None:
        gateway = StorageGateway(InMemoryBackend(), config=LedgerConfig(seed_demo=False))

        with caplog.at_level(logging.WARNING, logger="prop_ledger"):
            gateway.apartments.delete("ghost")

        assert "[apartments] Ignoring delete of unknown id ghost" in caplog.text
