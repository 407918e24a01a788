"""Conversions between decimal currency amounts and stored minor units."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .exceptions import AmountOutOfRangeError, ValidationError

CENT = Decimal("0.01")

# Balances live in a signed 64-bit INTEGER column.
MAX_CENTS = 2**63 - 1
MAX_AMOUNT = Decimal(MAX_CENTS).scaleb(-2)


def to_cents(amount: Decimal | int | str) -> int:
    """Convert an amount with at most two decimal places to integer cents.

    Works on the digit tuple so no arithmetic context can round or overflow;
    amounts whose cents do not fit a balance column raise
    :class:`AmountOutOfRangeError`.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid amount: {amount!r}")

    sign, digits, exponent = value.as_tuple()
    extra_places = -2 - exponent
    if extra_places > 0 and any(digits[-extra_places:]):
        raise ValidationError("Amount must have at most two decimal places")
    if value.copy_abs() > MAX_AMOUNT:
        raise AmountOutOfRangeError()
    return int(Decimal((sign, digits, exponent + 2)))


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)


__all__ = ["CENT", "MAX_AMOUNT", "MAX_CENTS", "from_cents", "to_cents"]
