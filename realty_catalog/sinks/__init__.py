"""Output sinks for catalog listings and reports."""

from realty_catalog.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
