"""Samlemodul for generelle hjelpere."""

from .dates import format_payment_date, parse_payment_date
from .formatting import (
    format_display_amount,
    format_json_amount,
    format_swish_amount,
)
from .number_parsing import to_amount

__all__ = [
    "format_display_amount",
    "format_json_amount",
    "format_payment_date",
    "format_swish_amount",
    "parse_payment_date",
    "to_amount",
]
