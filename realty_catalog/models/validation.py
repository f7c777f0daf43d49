"""Field validators shared by the catalog models.

Each validator returns the value unchanged when it is acceptable and raises
``MissingRequiredFieldError`` for ``None`` or ``InvalidArgumentError`` for
anything else that falls outside the field's rule.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from realty_catalog.exceptions import InvalidArgumentError, MissingRequiredFieldError


def require_text(field: str, value: Any, min_length: int, max_length: int) -> str:
    """Validate a required string whose length lies in ``[min_length, max_length]``."""
    if value is None:
        raise MissingRequiredFieldError(field)
    return _check_text(field, value, min_length, max_length)


def optional_text(field: str, value: Any, min_length: int, max_length: int) -> str | None:
    """Like ``require_text`` but ``None`` is accepted as "not present"."""
    if value is None:
        return None
    return _check_text(field, value, min_length, max_length)


def require_int_between(field: str, value: Any, low: int, high: int) -> int:
    """Validate an integer in the inclusive range ``[low, high]``."""
    if value is None:
        raise MissingRequiredFieldError(field)
    # bool is an int subclass; True is not a bedroom count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(field, value, "expected an integer")
    if value < low or value > high:
        raise InvalidArgumentError(field, value, f"expected {low}..{high}")
    return value


def require_flag(field: str, value: Any) -> bool:
    """Validate a boolean flag."""
    if value is None:
        raise MissingRequiredFieldError(field)
    if not isinstance(value, bool):
        raise InvalidArgumentError(field, value, "expected a bool")
    return value


def require_positive_amount(field: str, value: Any) -> Decimal:
    """Validate a strictly positive, finite amount and return it as ``Decimal``."""
    if value is None:
        raise MissingRequiredFieldError(field)
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidArgumentError(field, value, "expected a number")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidArgumentError(field, value, "expected a number") from exc

    if not amount.is_finite() or amount <= 0:
        raise InvalidArgumentError(field, value, "must be greater than 0")
    return amount


def _check_text(field: str, value: Any, min_length: int, max_length: int) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(field, value, "expected a string")
    if len(value) < min_length or len(value) > max_length:
        raise InvalidArgumentError(
            field, value, f"length must be {min_length}..{max_length}"
        )
    return value
