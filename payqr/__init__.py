"""Betalingsinformasjon i QR-koder for det svenske markedet.

Formatet for bankoverføring er beskrevet på https://www.qrkod.info/.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .bank_transfer import SerializationError, encode_bank_transfer
from .models import (
    Payment,
    PaymentMethod,
    SwishEditableField,
    TransferType,
    new_payment,
)
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
    "Payment",
    "PaymentMethod",
    "SerializationError",
    "SwishEditableField",
    "TransferType",
    "batch",
    "encode_bank_transfer",
    "encode_swish",
    "new_payment",
    "pdf_export",
    "symbol",
    "with_address",
    "with_bank_code",
    "with_country_code",
    "with_creation_date",
    "with_credit_invoice_reference",
    "with_currency",
    "with_editable_fields",
    "with_payment_type",
    "with_type",
    "with_vat",
]

# Moduler med tunge avhengigheter (qrcode, pandas, reportlab) lastes først ved bruk.
_MODULE_MAP = {
    'batch': 'payqr.batch',
    'pdf_export': 'payqr.pdf_export',
    'symbol': 'payqr.symbol',
}


def __getattr__(name: str) -> Any:
    """Last moduler først når de faktisk brukes."""

    if name in _MODULE_MAP:
        module = import_module(_MODULE_MAP[name])
        globals()[name] = module
        return module
    raise AttributeError(f"module 'payqr' has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(__all__ + list(globals().keys())))
