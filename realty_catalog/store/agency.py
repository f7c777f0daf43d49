"""Agency registry: in-memory store of listed properties with query helpers."""

import logging
from collections import Counter
from dataclasses import FrozenInstanceError, dataclass, field
from decimal import Decimal
from typing import Any, Iterator

from realty_catalog.exceptions import InvalidArgumentError, MissingRequiredFieldError
from realty_catalog.models import Address, ListingOrder, Property
from realty_catalog.models.validation import require_text
from realty_catalog.report import build_type_report

logger = logging.getLogger(__name__)

MIN_AGENCY_NAME_LENGTH = 1
MAX_AGENCY_NAME_LENGTH = 31


@dataclass
class Agency:
    """Real estate agency managing properties keyed by property id.

    Queries are linear scans in ``ordering`` order. Queries that match
    nothing return ``None`` rather than an empty container, so callers can
    tell "no results" apart from a result. The store is not thread-safe;
    callers sharing an agency across threads must serialize access.
    """

    name: str
    ordering: ListingOrder = ListingOrder.INSERTION
    properties: dict[str, Property] = field(default_factory=dict, init=False)

    def __setattr__(self, name: str, value: Any) -> None:
        # name is fixed once set; ordering may change but is always a ListingOrder
        if name == "name":
            if name in self.__dict__:
                raise FrozenInstanceError("cannot assign to field 'name'")
            value = require_text(
                "agency name", value, MIN_AGENCY_NAME_LENGTH, MAX_AGENCY_NAME_LENGTH
            )
        elif name == "ordering":
            try:
                value = ListingOrder(value)
            except ValueError as exc:
                raise InvalidArgumentError("listing order", value) from exc
        super().__setattr__(name, value)

    # Registry operations
    def add_property(self, prop: Property | None) -> None:
        """Add a property, replacing any property with the same id."""
        if prop is None:
            return
        if prop.property_id in self.properties:
            logger.debug("Agency %s: replacing property %s", self.name, prop.property_id)
        else:
            logger.debug("Agency %s: adding property %s", self.name, prop.property_id)
        self.properties[prop.property_id] = prop

    def remove_property(self, property_id: str) -> None:
        """Remove a property; unknown ids are ignored."""
        if self.properties.pop(property_id, None) is not None:
            logger.debug("Agency %s: removed property %s", self.name, property_id)

    def get_property(self, property_id: str) -> Property | None:
        """Get a property by id, or ``None`` if not listed."""
        return self.properties.get(property_id)

    # Query methods
    def total_property_value(self) -> Decimal:
        """Sum of all listed prices in USD."""
        return sum((prop.price_usd for prop in self._scan()), Decimal(0))

    def properties_with_pool(self) -> list[Property] | None:
        """Get all properties with a swimming pool."""
        return [prop for prop in self._scan() if prop.has_pool] or None

    def properties_in_price_range(
        self, min_usd: int | float | Decimal, max_usd: int | float | Decimal
    ) -> list[Property] | None:
        """Get properties priced between ``min_usd`` and ``max_usd`` inclusive."""
        return [prop for prop in self._scan() if min_usd <= prop.price_usd <= max_usd] or None

    def properties_on_street(self, street_name: str) -> list[Address] | None:
        """Get the addresses of properties on ``street_name``, ignoring case."""
        if street_name is None:
            raise MissingRequiredFieldError("street name")
        wanted = street_name.lower()
        return [
            prop.address
            for prop in self._scan()
            if prop.address.street_name.lower() == wanted
        ] or None

    def properties_with_bedrooms_between(
        self, min_bedrooms: int, max_bedrooms: int
    ) -> dict[str, Property] | None:
        """Get properties whose bedroom count lies in the inclusive range, keyed by id."""
        return {
            prop.property_id: prop
            for prop in self._scan()
            if min_bedrooms <= prop.bedrooms <= max_bedrooms
        } or None

    def properties_of_type(self, residence_type: str) -> list[Property] | None:
        """Get properties of ``residence_type``, ignoring case."""
        if residence_type is None:
            raise MissingRequiredFieldError("residence type")
        wanted = residence_type.lower()
        return [
            prop for prop in self._scan() if prop.residence_type.lower() == wanted
        ] or None

    def describe_properties_of_type(self, residence_type: str) -> list[str]:
        """Report properties of ``residence_type`` as numbered, formatted lines.

        Parameters
        ----------
        residence_type : str
            Type to report on, matched ignoring case.

        Returns
        -------
        list[str]
            ``"Type: <TYPE>"`` followed by one line per match, or by
            ``"<none found>"`` when nothing matches.
        """
        return build_type_report(residence_type, self.properties_of_type(residence_type))

    def summary(self) -> dict[str, Any]:
        """Return summary counts of the listed properties."""
        by_type = Counter(prop.kind.value for prop in self._scan())
        return {
            "properties": len(self.properties),
            "by_type": dict(by_type),
            "with_pool": sum(1 for prop in self._scan() if prop.has_pool),
            "total_value": self.total_property_value(),
        }

    def _scan(self) -> Iterator[Property]:
        """Iterate over properties in the configured order."""
        if self.ordering is ListingOrder.PROPERTY_ID:
            for property_id in sorted(self.properties):
                yield self.properties[property_id]
        else:
            yield from self.properties.values()
