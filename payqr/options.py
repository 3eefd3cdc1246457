"""Alternativer som justerer en betaling når den opprettes.

Hvert alternativ er en funksjon som tar imot :class:`~payqr.models.Payment`
og endrer ett eller flere felt. De brukes i den rekkefølgen de gis til
:func:`~payqr.models.new_payment`.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from .helpers.dates import format_payment_date
from .models import Option, Payment, PaymentMethod, TransferType

__all__ = [
    "with_address",
    "with_bank_code",
    "with_country_code",
    "with_creation_date",
    "with_credit_invoice_reference",
    "with_currency",
    "with_payment_type",
    "with_type",
    "with_vat",
]


def _coerce_transfer_type(value: Union[TransferType, int]) -> TransferType:
    try:
        return TransferType(value)
    except ValueError as exc:
        raise ValueError(f"Ukjent overføringstype: {value!r}") from exc


def _coerce_payment_method(value: Union[PaymentMethod, str]) -> PaymentMethod:
    if isinstance(value, PaymentMethod):
        return value
    try:
        return PaymentMethod(str(value).strip().upper())
    except ValueError as exc:
        raise ValueError(f"Ukjent betalingstype: {value!r}") from exc


def with_creation_date(value: Union[date, datetime]) -> Option:
    """Setter opprettelsesdato. Standard er dagens dato."""

    formatted = format_payment_date(value)

    def apply(payment: Payment) -> None:
        payment.created_date = formatted

    return apply


def with_type(transfer_type: Union[TransferType, int]) -> Option:
    """Setter overføringstypen."""

    coerced = _coerce_transfer_type(transfer_type)

    def apply(payment: Payment) -> None:
        payment.transfer_type = coerced

    return apply


def with_payment_type(method: Union[PaymentMethod, str]) -> Option:
    """Setter betalingstypen. For svenske innenlandsbetalinger er BG og PG vanligst."""

    coerced = _coerce_payment_method(method)

    def apply(payment: Payment) -> None:
        payment.payment_method = coerced

    return apply


def with_currency(currency: str) -> Option:
    """Setter valuta for utenlandsbetalinger."""

    def apply(payment: Payment) -> None:
        payment.currency = currency

    return apply


def with_address(address: str) -> Option:
    def apply(payment: Payment) -> None:
        payment.address = address

    return apply


def with_country_code(country_code: str) -> Option:
    """Setter landkode (ISO 3166-1 alpha-2)."""

    def apply(payment: Payment) -> None:
        payment.country_code = country_code

    return apply


def with_bank_code(bank_code: str) -> Option:
    """Setter bankkode. Varierer med betalingstypen og kan være BIC/SWIFT."""

    def apply(payment: Payment) -> None:
        payment.bank_code = bank_code

    return apply


def with_credit_invoice_reference(reference: str) -> Option:
    """Setter referansen til fakturaen en kreditnota gjelder."""

    def apply(payment: Payment) -> None:
        payment.credit_invoice_reference = reference

    return apply


def with_vat(
    standard: Optional[int] = None,
    *,
    high: Optional[int] = None,
    medium: Optional[int] = None,
    low: Optional[int] = None,
) -> Option:
    """Setter momssatser i prosent. Satser som ikke oppgis beholdes."""

    def apply(payment: Payment) -> None:
        if standard is not None:
            payment.vat = int(standard)
        if high is not None:
            payment.high_vat = int(high)
        if medium is not None:
            payment.medium_vat = int(medium)
        if low is not None:
            payment.low_vat = int(low)

    return apply
