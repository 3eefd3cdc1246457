"""Formattering av beløp for de ulike kodeformatene."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

Amount = Union[Decimal, int, float, str]

_TWO_PLACES = Decimal("0.01")


def _as_decimal(value: Optional[Amount]) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def format_json_amount(value: Decimal) -> str:
    """Formatterer et beløp med kun så mange desimaler som trengs.

    ``Decimal("50.00")`` blir ``"50"`` og ``Decimal("10.75")`` forblir
    ``"10.75"``. Eksponentnotasjon brukes aldri.
    """

    if not value.is_finite():
        raise ValueError(f"Beløpet {value!r} kan ikke representeres som tall.")
    # Presisjonen må dekke alle sifrene, ellers runder normalize() av.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        return format(value.normalize(), "f")


def _quantize_cents(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def format_swish_amount(value: Decimal) -> str:
    """Formatterer et beløp med nøyaktig to desimaler.

    Uendelige verdier og NaN skrives som ``+Inf``, ``-Inf`` og ``NaN``.
    """

    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Inf" if value.is_signed() else "+Inf"
    return format(_quantize_cents(value), "f")


def _format_thousands(value: Decimal) -> str:
    """Formaterer med mellomrom som tusenskille og komma som desimaltegn."""

    return f"{value:,.2f}".replace(",", " ").replace(".", ",")


def format_display_amount(value: Optional[Amount], currency: str = "") -> str:
    """Formatterer beløp for visning, f.eks. ``1 234,50 SEK``."""

    decimal_value = _as_decimal(value)
    if decimal_value is None or not decimal_value.is_finite():
        return "—"
    rounded = _quantize_cents(decimal_value)
    text = _format_thousands(rounded)
    return f"{text} {currency}".strip()


__all__ = [
    "Amount",
    "format_display_amount",
    "format_json_amount",
    "format_swish_amount",
]
