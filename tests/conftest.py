"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from realty_catalog.models import Address, Property
from realty_catalog.store import Agency


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def elm_address() -> Address:
    """Address without a unit number."""
    return Address(
        street_number=12,
        street_name="Elm St",
        postal_code="A1A1A1",
        city="Springfield",
    )


@pytest.fixture
def elm_property(elm_address: Address) -> Property:
    """Three-bedroom residence without a pool."""
    return Property(
        price_usd=250000,
        address=elm_address,
        bedrooms=3,
        has_pool=False,
        residence_type="residence",
        property_id="P1",
    )


@pytest.fixture
def agency() -> Agency:
    """Empty agency."""
    return Agency("Acme")


def _make_property(
    property_id: str,
    price: int | Decimal = 100000,
    bedrooms: int = 2,
    has_pool: bool = False,
    residence_type: str = "residence",
    street_name: str = "Main St",
    unit_number: str | None = None,
) -> Property:
    """Build a valid property, overriding only what a test cares about."""
    return Property(
        price_usd=price,
        address=Address(
            street_number=100,
            street_name=street_name,
            postal_code="90210",
            city="Beverly Hills",
            unit_number=unit_number,
        ),
        bedrooms=bedrooms,
        has_pool=has_pool,
        residence_type=residence_type,
        property_id=property_id,
    )


@pytest.fixture
def make_property():
    """Factory for valid properties."""
    return _make_property
