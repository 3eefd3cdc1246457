"""Masseoppretting av betalingskoder fra en pandas DataFrame.

Hver rad blir én :class:`~payqr.models.Payment`. Beløp og datoer tolkes
tolerant, slik at regneark med svenske tallformater (``1 234,50``) kan brukes
direkte.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

from .bank_transfer import encode_bank_transfer
from .helpers.dates import parse_payment_date
from .helpers.number_parsing import to_amount
from .models import Option, Payment, SwishEditableField, new_payment
from .options import (
    with_address,
    with_bank_code,
    with_country_code,
    with_creation_date,
    with_credit_invoice_reference,
    with_currency,
    with_payment_type,
    with_type,
    with_vat,
)
from .swish import encode_swish, with_editable_fields

__all__ = [
    "DEFAULT_COLUMNS",
    "encode_frame",
    "payments_from_frame",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_COLUMNS: Dict[str, str] = {
    "account_number": "account_number",
    "name": "name",
    "company_id": "company_id",
    "reference": "reference",
    "amount": "amount",
    "due_date": "due_date",
    "created_date": "created_date",
    "transfer_type": "transfer_type",
    "payment_method": "payment_method",
    "currency": "currency",
    "country_code": "country_code",
    "bank_code": "bank_code",
    "address": "address",
    "credit_reference": "credit_reference",
    "vat": "vat",
}

_TEXT_OPTIONS = {
    "currency": with_currency,
    "country_code": with_country_code,
    "bank_code": with_bank_code,
    "address": with_address,
    "credit_reference": with_credit_invoice_reference,
    "payment_method": with_payment_type,
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _resolve_columns(columns: Optional[Mapping[str, str]]) -> Dict[str, str]:
    resolved = dict(DEFAULT_COLUMNS)
    if columns:
        resolved.update(columns)
    return resolved


def _row_options(
    row: Mapping[str, Any], mapping: Mapping[str, str], label: str
) -> List[Option]:
    options: List[Option] = []

    created_column = mapping["created_date"]
    if created_column in row:
        created = parse_payment_date(row[created_column])
        if created is not None:
            options.append(with_creation_date(created))

    type_text = _text(row.get(mapping["transfer_type"]))
    if type_text:
        try:
            options.append(with_type(int(type_text)))
        except ValueError:
            _LOGGER.warning("Ukjent overføringstype %r i %s", type_text, label)

    for field_name, factory in _TEXT_OPTIONS.items():
        text = _text(row.get(mapping[field_name]))
        if text:
            options.append(factory(text))

    vat_text = _text(row.get(mapping["vat"]))
    if vat_text:
        options.append(with_vat(int(to_amount(vat_text))))

    return options


def payments_from_frame(
    frame: pd.DataFrame,
    *,
    columns: Optional[Mapping[str, str]] = None,
    options: Sequence[Option] = (),
) -> List[Payment]:
    """Bygger én betaling per rad i ``frame``.

    ``columns`` overstyrer kolonnenavn per felt (se :data:`DEFAULT_COLUMNS`).
    ``options`` brukes på alle betalinger før radens egne alternativer.
    """

    mapping = _resolve_columns(columns)
    payments: List[Payment] = []
    for index, row in frame.iterrows():
        label = f"rad {index}"
        raw_amount = row.get(mapping["amount"])
        amount_text = _text(raw_amount)
        amount = to_amount(amount_text or None)
        if amount == 0 and any(ch in "123456789" for ch in amount_text):
            _LOGGER.warning("Kunne ikke tolke beløpet %r i %s", raw_amount, label)

        raw_due = row.get(mapping["due_date"])
        due_date = parse_payment_date(raw_due)
        if due_date is None and _text(raw_due):
            _LOGGER.warning("Kunne ikke tolke forfallsdato %r i %s", raw_due, label)

        payments.append(
            new_payment(
                _text(row.get(mapping["account_number"])),
                _text(row.get(mapping["name"])),
                _text(row.get(mapping["company_id"])),
                _text(row.get(mapping["reference"])),
                amount,
                due_date,
                *options,
                *_row_options(row, mapping, label),
            )
        )
    return payments


def encode_frame(
    frame: pd.DataFrame,
    *,
    swish_phone: Optional[str] = None,
    editable: SwishEditableField = SwishEditableField.NONE,
    columns: Optional[Mapping[str, str]] = None,
    options: Sequence[Option] = (),
) -> pd.DataFrame:
    """Returnerer en kopi av ``frame`` med kolonnene ``payload`` og ``valid``.

    Uten ``swish_phone`` blir ``payload`` JSON for bankoverføring, ellers
    Swish-strengen.
    """

    payments = payments_from_frame(frame, columns=columns, options=options)
    if swish_phone is None:
        payloads = [encode_bank_transfer(payment) for payment in payments]
    else:
        payloads = [
            encode_swish(payment, swish_phone, with_editable_fields(editable))
            for payment in payments
        ]

    result = frame.copy()
    result["payload"] = payloads
    result["valid"] = [payment.has_required_fields() for payment in payments]
    return result
