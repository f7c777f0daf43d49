"""Base generator class for sample data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from realty_catalog.exceptions import ConfigurationError

# Locales whose postal codes fit the Address rules (5-digit ZIP, 6-char Canadian code)
SUPPORTED_LOCALES: tuple[str, ...] = ("en_US", "en_CA")


class BaseGenerator(ABC):
    """Base class for all sample data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale, one of ``SUPPORTED_LOCALES`` (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        if locale not in SUPPORTED_LOCALES:
            raise ConfigurationError(
                f"Unsupported locale {locale!r}; expected one of {', '.join(SUPPORTED_LOCALES)}"
            )
        self.locale = locale
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)


def clip(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters without leaving trailing spaces."""
    clipped = text[:max_length]
    return clipped.rstrip() or clipped
