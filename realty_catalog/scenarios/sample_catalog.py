"""Sample catalog scenario: a populated agency for demos and manual checks."""

import logging
from typing import Any

from realty_catalog.config import CatalogConfig
from realty_catalog.generators import PropertyGenerator
from realty_catalog.models import ResidenceType
from realty_catalog.store import Agency

logger = logging.getLogger(__name__)


class SampleCatalogScenario:
    """Generate an agency filled with synthetic listings.

    The scenario builds the agency once in ``generate()`` and can then
    push its listings and one report per residence type to any number of
    sinks.
    """

    def __init__(self, config: CatalogConfig | None = None) -> None:
        """Initialize sample catalog scenario.

        Parameters
        ----------
        config : CatalogConfig | None
            Agency name, ordering, seed and sample settings. Defaults to
            ``CatalogConfig()``.
        """
        self.config = config or CatalogConfig()
        self.agency = Agency(self.config.agency_name, ordering=self.config.ordering)
        self._property_gen = PropertyGenerator(
            seed=self.config.seed,
            locale=self.config.sample.locale,
            pool_rate=self.config.sample.pool_rate,
        )

    def generate(self) -> Agency:
        """Generate all listings for the scenario.

        Returns
        -------
        Agency
            Agency containing the generated properties.
        """
        logger.info(
            "Starting sample catalog scenario: %d properties for %s",
            self.config.sample.num_properties,
            self.agency.name,
        )

        for _ in range(self.config.sample.num_properties):
            self.agency.add_property(self._property_gen.generate())

        summary = self.agency.summary()
        logger.info(
            "Generated catalog: %d properties, %d with pool, total value $%s",
            summary["properties"],
            summary["with_pool"],
            summary["total_value"],
        )
        return self.agency

    def export(self, sinks: list[Any]) -> None:
        """Export listings and per-type reports to sinks.

        Parameters
        ----------
        sinks : list[Any]
            Sink instances exposing ``write_batch`` and ``write_report``.
        """
        properties = list(self.agency.properties.values())
        for sink in sinks:
            sink.write_batch("properties", properties)
            for residence_type in ResidenceType:
                sink.write_report(self.agency.describe_properties_of_type(residence_type.value))

        logger.info("Exported sample catalog to %d sinks", len(sinks))
