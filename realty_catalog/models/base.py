"""Address value object shared by catalog entities."""

from dataclasses import dataclass

from realty_catalog.models.validation import (
    optional_text,
    require_int_between,
    require_text,
)

MIN_STREET_NUMBER = 1
MAX_STREET_NUMBER = 999_999


@dataclass(frozen=True)
class Address:
    """Immutable postal location of a listed property.

    Fields:
    - street_number: 1 to 999999
    - street_name: 1 to 20 characters
    - postal_code: 5 or 6 characters (ZIP or Canadian postal code)
    - city: 1 to 30 characters
    - unit_number: optional suite/apartment label, 1 to 4 characters
    """

    street_number: int
    street_name: str
    postal_code: str
    city: str
    unit_number: str | None = None

    def __post_init__(self) -> None:
        """Validate every field; a failing address is never returned."""
        optional_text("unit number", self.unit_number, 1, 4)
        require_int_between(
            "street number", self.street_number, MIN_STREET_NUMBER, MAX_STREET_NUMBER
        )
        require_text("street name", self.street_name, 1, 20)
        require_text("postal code", self.postal_code, 5, 6)
        require_text("city", self.city, 1, 30)
