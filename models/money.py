"""Decimal helpers shared by the ledger models.

All money values are ``Decimal``.  Rounding is half-up: 2 places for cash,
prices and totals, 4 places for average cost.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
BASIS = Decimal("0.0001")
ZERO = Decimal("0")


def round2(value: Decimal) -> Decimal:
    """Round *value* half-up to 2 decimal places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round4(value: Decimal) -> Decimal:
    """Round *value* half-up to 4 decimal places."""
    return value.quantize(BASIS, rounding=ROUND_HALF_UP)


def to_decimal(value: str | int | float | Decimal) -> Decimal:
    """Coerce *value* to ``Decimal``.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.
    Raises ``ValueError`` for text that is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result
