"""Domain models for the real estate catalog."""

from realty_catalog.models.base import Address
from realty_catalog.models.enums import ListingOrder, ResidenceType
from realty_catalog.models.property import Property

__all__ = ["Address", "ListingOrder", "Property", "ResidenceType"]
