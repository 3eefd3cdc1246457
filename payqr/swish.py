"""Koding av betalinger til formatet Swish bruker i QR-koder."""

from __future__ import annotations

from typing import Union

from .constants import SWISH_PREFIX, SWISH_SEPARATOR
from .helpers.formatting import format_swish_amount
from .models import Option, Payment, SwishEditableField, coerce_amount

__all__ = [
    "SwishEditableField",
    "SwishOption",
    "encode_swish",
    "with_editable_fields",
]

SwishOption = Option


def with_editable_fields(fields: Union[SwishEditableField, int]) -> SwishOption:
    """Låser opp felt for redigering når mottakeren åpner koden i appen.

    Felt som settes som redigerbare låser automatisk de andre.
    """

    mask = SwishEditableField(fields)

    def apply(payment: Payment) -> None:
        payment.swish_editable_fields = mask

    return apply


def encode_swish(payment: Payment, phone_number: str, *options: SwishOption) -> str:
    """Koder betalingen som ``C<telefon>;<beløp>;<melding>;<redigerbare felt>``.

    Telefonnummeret valideres ikke.
    """

    for option in options:
        option(payment)

    amount = format_swish_amount(coerce_amount(payment.due_amount))
    return SWISH_SEPARATOR.join(
        [
            f"{SWISH_PREFIX}{phone_number}",
            amount,
            payment.reference,
            str(int(payment.swish_editable_fields)),
        ]
    )
