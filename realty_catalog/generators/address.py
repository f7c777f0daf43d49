"""Address generation factory for North American locales."""

import random

from realty_catalog.generators.base import BaseGenerator, clip
from realty_catalog.models.base import Address


class AddressFactory(BaseGenerator):
    """Generate valid addresses with Faker's locale-specific providers.

    Faker values are fitted to the ``Address`` bounds: street names are cut
    to 20 characters, cities to 30, and Canadian postal codes lose their
    inner space (``"K1A 0B1"`` becomes ``"K1A0B1"``).

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        ``en_US`` or ``en_CA``.
    unit_rate : float
        Share of addresses that get a unit number.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        unit_rate: float = 0.25,
    ) -> None:
        super().__init__(seed=seed, locale=locale)
        self.unit_rate = unit_rate

    def generate(self) -> Address:
        """Generate an address.

        Returns
        -------
        Address
            Generated address.
        """
        unit_number = None
        if random.random() < self.unit_rate:
            unit_number = str(random.randint(1, 9999))

        return Address(
            street_number=random.randint(1, 9999),
            street_name=clip(self.fake.street_name(), 20),
            postal_code=self._postal_code(),
            city=clip(self.fake.city(), 30),
            unit_number=unit_number,
        )

    def _postal_code(self) -> str:
        code = self.fake.postcode().replace(" ", "").upper()
        if 5 <= len(code) <= 6:
            return code
        # ZIP+4 and other long forms
        return code[:5]
