"""Faker-backed generators for sample catalog data."""

from realty_catalog.generators.address import AddressFactory
from realty_catalog.generators.base import SUPPORTED_LOCALES, BaseGenerator
from realty_catalog.generators.property import PropertyGenerator

__all__ = ["AddressFactory", "BaseGenerator", "PropertyGenerator", "SUPPORTED_LOCALES"]
