"""Enumeration types for catalog entities."""

from enum import Enum

from realty_catalog.exceptions import InvalidArgumentError, MissingRequiredFieldError


class ResidenceType(str, Enum):
    RESIDENCE = "residence"
    COMMERCIAL = "commercial"
    RETAIL = "retail"

    @classmethod
    def parse(cls, text: str | None) -> "ResidenceType":
        """Look up a residence type ignoring case.

        Raises
        ------
        MissingRequiredFieldError
            If ``text`` is ``None``.
        InvalidArgumentError
            If ``text`` names no known residence type.
        """
        if text is None:
            raise MissingRequiredFieldError("residence type")
        if isinstance(text, str):
            for member in cls:
                if member.value == text.lower():
                    return member
        raise InvalidArgumentError("residence type", text)


class ListingOrder(str, Enum):
    """Order in which an agency scans its properties."""

    INSERTION = "insertion"
    PROPERTY_ID = "property_id"
