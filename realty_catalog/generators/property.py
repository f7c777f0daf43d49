"""Property generator for sample listings."""

import random
from decimal import Decimal

from realty_catalog.exceptions import ConfigurationError
from realty_catalog.generators.address import AddressFactory
from realty_catalog.generators.base import BaseGenerator
from realty_catalog.models import Property, ResidenceType

# Price bands in thousands of USD
PRICE_RANGES: dict[ResidenceType, tuple[int, int]] = {
    ResidenceType.RESIDENCE: (150, 2000),
    ResidenceType.COMMERCIAL: (400, 5000),
    ResidenceType.RETAIL: (250, 3000),
}

TYPE_WEIGHTS: dict[ResidenceType, float] = {
    ResidenceType.RESIDENCE: 0.70,
    ResidenceType.COMMERCIAL: 0.15,
    ResidenceType.RETAIL: 0.15,
}


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings.

    Identifiers are sequential (``P00001``, ``P00002``, ...) so every
    generated property fits the 6-character id limit and no two collide.
    """

    MAX_SEQUENCE = 99_999

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pool_rate: float = 0.3,
    ) -> None:
        super().__init__(seed=seed, locale=locale)
        self.pool_rate = pool_rate
        self._address_factory = AddressFactory(seed=seed, locale=locale)
        self._sequence = 0

    def generate(self) -> Property:
        """Generate a property.

        Returns
        -------
        Property
            Generated property.
        """
        if self._sequence >= self.MAX_SEQUENCE:
            raise ConfigurationError(
                f"Cannot generate more than {self.MAX_SEQUENCE} properties per generator"
            )
        self._sequence += 1

        residence_type = random.choices(
            list(TYPE_WEIGHTS), weights=list(TYPE_WEIGHTS.values()), k=1
        )[0]
        low, high = PRICE_RANGES[residence_type]
        price = random.randint(low, high) * 1000

        # Commercial and retail units are listed with a nominal bedroom count
        if residence_type is ResidenceType.RESIDENCE:
            bedrooms = random.randint(1, 6)
        else:
            bedrooms = 1

        return Property(
            price_usd=Decimal(price),
            address=self._address_factory.generate(),
            bedrooms=bedrooms,
            has_pool=random.random() < self.pool_rate,
            residence_type=residence_type.value,
            property_id=f"P{self._sequence:05d}",
        )
