"""Scenarios for generating sample catalogs."""

from realty_catalog.scenarios.sample_catalog import SampleCatalogScenario

__all__ = ["SampleCatalogScenario"]
