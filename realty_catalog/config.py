"""Configuration management for realty-catalog."""

import os
from dataclasses import dataclass, field
from typing import Any, Callable

from realty_catalog.exceptions import ConfigurationError
from realty_catalog.logging import LOG_FORMATS
from realty_catalog.models.enums import ListingOrder


@dataclass
class SampleConfig:
    """Sample catalog generation settings."""

    num_properties: int = 25
    locale: str = "en_US"
    pool_rate: float = 0.3


@dataclass
class CatalogConfig:
    """Main configuration for realty-catalog."""

    agency_name: str = "Sample Realty"
    ordering: ListingOrder = ListingOrder.INSERTION
    sample: SampleConfig = field(default_factory=SampleConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Create config from environment variables."""
        sample = SampleConfig(
            num_properties=_env_number("SAMPLE_SIZE", "25", int),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            pool_rate=_env_number("POOL_RATE", "0.3", float),
        )

        ordering_str = os.getenv("LISTING_ORDER", ListingOrder.INSERTION.value)
        try:
            ordering = ListingOrder(ordering_str.lower())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown LISTING_ORDER: {ordering_str!r}") from exc

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown LOG_FORMAT: {log_format!r}")

        return cls(
            agency_name=os.getenv("AGENCY_NAME", "Sample Realty"),
            ordering=ordering,
            sample=sample,
            seed=_env_number("SEED", None, int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _env_number(name: str, default: str | None, convert: Callable[[str], Any]) -> Any:
    raw = os.getenv(name, default)
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
