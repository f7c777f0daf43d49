"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from realty_catalog.config import CatalogConfig, SampleConfig
from realty_catalog.exceptions import ConfigurationError
from realty_catalog.logging import JsonFormatter, setup_logging
from realty_catalog.models import ListingOrder

ENV_VARS = [
    "AGENCY_NAME",
    "LISTING_ORDER",
    "SAMPLE_SIZE",
    "FAKER_LOCALE",
    "POOL_RATE",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env():
    """Environment without any catalog variables."""
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestSampleConfig:
    """Tests for SampleConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = SampleConfig()

        assert config.num_properties == 25
        assert config.locale == "en_US"
        assert config.pool_rate == 0.3


class TestCatalogConfig:
    """Tests for CatalogConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = CatalogConfig()

        assert config.agency_name == "Sample Realty"
        assert config.ordering is ListingOrder.INSERTION
        assert isinstance(config.sample, SampleConfig)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env) -> None:
        """Test creating config from an empty environment."""
        config = CatalogConfig.from_env()

        assert config == CatalogConfig()

    def test_from_env_custom(self, clean_env) -> None:
        """Test creating config from custom environment variables."""
        env_vars = {
            "AGENCY_NAME": "Harbour Homes",
            "LISTING_ORDER": "PROPERTY_ID",
            "SAMPLE_SIZE": "40",
            "FAKER_LOCALE": "en_CA",
            "POOL_RATE": "0.5",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogConfig.from_env()

        assert config.agency_name == "Harbour Homes"
        assert config.ordering is ListingOrder.PROPERTY_ID
        assert config.sample.num_properties == 40
        assert config.sample.locale == "en_CA"
        assert config.sample.pool_rate == 0.5
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("LISTING_ORDER", "random"),
            ("SAMPLE_SIZE", "many"),
            ("SEED", "1.5"),
            ("POOL_RATE", "half"),
            ("LOG_FORMAT", "xml"),
        ],
    )
    def test_from_env_invalid(self, clean_env, name: str, value: str) -> None:
        """Test unparseable values raise ConfigurationError."""
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(ConfigurationError):
                CatalogConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_setup_logging_custom_stream(self) -> None:
        """Test records go to the given stream as JSON lines."""
        stream = io.StringIO()
        setup_logging(format_type="json", stream=stream)

        logging.getLogger("realty_catalog.test").info("Added %s", "P1")

        assert json.loads(stream.getvalue())["message"] == "Added P1"

    def test_faker_logger_quieted(self) -> None:
        """Test that Faker's logger stays at WARNING."""
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
            msg="Added %s",
            args=("P1",),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Added P1"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test formatting with exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]


class TestPackageInit:
    """Tests for realty_catalog __init__.py."""

    def test_version_exported(self) -> None:
        """Test that __version__ is exported."""
        from realty_catalog import __version__

        assert isinstance(__version__, str)
