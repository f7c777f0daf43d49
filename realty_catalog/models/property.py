"""Property model for agency listings."""

from dataclasses import FrozenInstanceError, dataclass
from decimal import Decimal
from typing import Any

from realty_catalog.exceptions import InvalidArgumentError, MissingRequiredFieldError
from realty_catalog.models.base import Address
from realty_catalog.models.enums import ResidenceType
from realty_catalog.models.validation import (
    require_flag,
    require_int_between,
    require_positive_amount,
    require_text,
)

MIN_BEDROOMS = 1
MAX_BEDROOMS = 20


@dataclass
class Property:
    """A single real estate listing.

    Every field is fixed once the object is built, except ``price_usd``:
    assigning a new price re-validates it and leaves the old price in place
    when the new one is rejected.
    """

    price_usd: Decimal
    address: Address
    bedrooms: int
    has_pool: bool
    residence_type: str  # kept as supplied; see ``kind`` for the parsed value
    property_id: str

    def __post_init__(self) -> None:
        if self.address is None:
            raise MissingRequiredFieldError("address")
        if not isinstance(self.address, Address):
            raise InvalidArgumentError("address", self.address, "expected an Address")
        require_int_between("number of bedrooms", self.bedrooms, MIN_BEDROOMS, MAX_BEDROOMS)
        require_flag("swimming pool flag", self.has_pool)
        ResidenceType.parse(self.residence_type)
        require_text("property id", self.property_id, 1, 6)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "price_usd":
            value = require_positive_amount("price", value)
        elif name in self.__dict__ or name not in self.__dataclass_fields__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @property
    def kind(self) -> ResidenceType:
        """Residence type as an enum member."""
        return ResidenceType.parse(self.residence_type)
