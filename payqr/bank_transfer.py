"""Serialisering av betalinger til JSON-formatet for bankoverføring.

Nøklene skrives alltid i den rekkefølgen feltene er deklarert i
:class:`~payqr.models.Payment`, og valgfrie felt utelates helt når de er tomme.
"""

from __future__ import annotations

import json
from dataclasses import fields
from decimal import Decimal
from enum import Enum
from typing import List, Tuple

from .helpers.formatting import format_json_amount
from .models import Payment, coerce_amount

__all__ = [
    "SerializationError",
    "encode_bank_transfer",
    "payment_to_fields",
]

# Samme escaping som eksisterende produsenter av formatet bruker.
_HTML_SAFE_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class SerializationError(ValueError):
    """Feil som signaliserer at en betaling ikke kan kodes som JSON."""


def _is_empty(value: object) -> bool:
    return value is None or value == "" or value == 0


def payment_to_fields(payment: Payment) -> List[Tuple[str, object]]:
    """Returnerer nøkkel/verdi-par i fast rekkefølge, uten tomme valgfrie felt."""

    pairs: List[Tuple[str, object]] = []
    for wire_field in fields(payment):
        key = wire_field.metadata.get("key")
        if key is None:
            continue
        value = getattr(payment, wire_field.name)
        if wire_field.metadata.get("omit_empty") and _is_empty(value):
            continue
        if isinstance(value, Enum):
            value = value.value
        pairs.append((key, value))
    return pairs


def _render_amount(value: object) -> str:
    try:
        amount = value if isinstance(value, Decimal) else coerce_amount(value)  # type: ignore[arg-type]
        return format_json_amount(amount)
    except ValueError as exc:
        raise SerializationError(f"Ugyldig beløp i betalingen: {value!r}") from exc


def _render_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (Decimal, float)):
        return _render_amount(value)
    return json.dumps("" if value is None else str(value), ensure_ascii=False)


def encode_bank_transfer(payment: Payment) -> str:
    """Koder betalingen som kompakt JSON på én linje."""

    parts = []
    for key, value in payment_to_fields(payment):
        rendered = _render_amount(value) if key == "due" else _render_value(value)
        parts.append(f"{json.dumps(key)}:{rendered}")
    return ("{" + ",".join(parts) + "}").translate(_HTML_SAFE_ESCAPES)
