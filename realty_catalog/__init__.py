"""In-memory real estate catalog: validated listings and agency queries."""

from realty_catalog.exceptions import (
    CatalogError,
    InvalidArgumentError,
    MissingRequiredFieldError,
)
from realty_catalog.models import Address, ListingOrder, Property, ResidenceType
from realty_catalog.store import Agency

__version__ = "0.1.0"

__all__ = [
    "Address",
    "Agency",
    "CatalogError",
    "InvalidArgumentError",
    "ListingOrder",
    "MissingRequiredFieldError",
    "Property",
    "ResidenceType",
    "__version__",
]
