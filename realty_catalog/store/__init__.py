"""In-memory stores for catalog entities."""

from realty_catalog.store.agency import Agency

__all__ = ["Agency"]
