"""Human-readable listing report for an agency's properties."""

from typing import Iterable

from realty_catalog.models import Property

NONE_FOUND = "<none found>"


def capitalize_words(text: str) -> str:
    """Title-case ``text`` word by word.

    Every whitespace character is written as a single space and starts a new
    word. The first letter of a word is upper-cased and the rest lower-cased.

    >>> capitalize_words("mcDONALD\\tavenue")
    'Mcdonald Avenue'
    """
    chars: list[str] = []
    capitalize_next = True

    for ch in text:
        if ch.isspace():
            chars.append(" ")
            capitalize_next = True
        elif capitalize_next:
            chars.append(ch.upper())
            capitalize_next = False
        else:
            chars.append(ch.lower())

    return "".join(chars)


def type_header(residence_type: str) -> str:
    """Return the report header naming ``residence_type``."""
    return f"Type: {residence_type.upper()}"


def format_listing(prop: Property, position: int) -> str:
    """Format one property as a numbered report line.

    Parameters
    ----------
    prop : Property
        Property to describe.
    position : int
        1-based sequence number shown at the start of the line.

    Returns
    -------
    str
        Line terminated by ``".\\n"``, e.g.
        ``"1) Property P1: 12 Elm St A1A1A1 in Springfield (3 bedrooms): $250000.\\n"``.
    """
    address = prop.address
    parts = [f"{position}) Property {prop.property_id.upper()}: "]

    if address.unit_number is not None and address.unit_number.strip():
        parts.append(f"unit #{address.unit_number} at ")

    noun = "bedroom" if prop.bedrooms == 1 else "bedrooms"
    pool = " plus pool" if prop.has_pool else ""

    parts.append(
        f"{address.street_number} {capitalize_words(address.street_name)} "
        f"{address.postal_code.upper()} in {capitalize_words(address.city)} "
        f"({prop.bedrooms} {noun}{pool}): ${int(prop.price_usd)}.\n"
    )
    return "".join(parts)


def build_type_report(residence_type: str, matches: Iterable[Property] | None) -> list[str]:
    """Build the report lines for one residence type.

    The first line is the header. Matching properties follow, numbered from 1
    in the order given. Without matches the header is followed by
    ``"<none found>"``.
    """
    lines = [type_header(residence_type)]
    lines.extend(
        format_listing(prop, position)
        for position, prop in enumerate(matches or (), start=1)
    )
    if len(lines) == 1:
        lines.append(NONE_FOUND)
    return lines
