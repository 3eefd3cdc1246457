"""Overlevering av kodet betalingstekst til QR-biblioteket.

Selve QR-symbolet lages av ``qrcode``. Vi ber alltid om høyeste
feilrettingsnivå; nivået kan ikke konfigureres.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Optional, Union

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H

from . import settings
from .bank_transfer import encode_bank_transfer
from .models import Option, Payment
from .swish import encode_swish

__all__ = [
    "PaymentSymbol",
    "generate_symbol",
    "payment_symbol",
    "swish_symbol",
]

_LOGGER = logging.getLogger(__name__)


@dataclass
class PaymentSymbol:
    """Et ferdig QR-symbol for en kodet betaling."""

    payload: str
    code: qrcode.QRCode

    @property
    def version(self) -> int:
        return int(self.code.version)

    @property
    def modules_count(self) -> int:
        return int(self.code.modules_count)

    def to_image(self, pixel_size: Optional[int] = None) -> bytes:
        """Returnerer PNG-bytes for et kvadratisk bilde på ``pixel_size`` piksler."""

        size = settings.IMAGE_SIZE if pixel_size is None else int(pixel_size)
        if size <= 0:
            raise ValueError(f"Bildestørrelsen må være positiv, fikk {size}.")

        total_modules = self.modules_count + 2 * self.code.border
        self.code.box_size = max(1, size // total_modules)
        image = self.code.make_image(
            fill_color="black", back_color="white"
        ).get_image()
        if image.size != (size, size):
            image = image.resize((size, size), Image.NEAREST)

        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, file_name: Union[str, Path], pixel_size: Optional[int] = None) -> Path:
        """Skriver symbolet som PNG-fil."""

        path = Path(file_name)
        path.write_bytes(self.to_image(pixel_size))
        return path


def generate_symbol(payload: str) -> PaymentSymbol:
    """Lager et QR-symbol med høyeste feilrettingsnivå for ``payload``."""

    code = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_H,
        border=settings.QUIET_ZONE,
    )
    code.add_data(payload)
    code.make(fit=True)
    if settings.LOG_PAYLOADS:
        _LOGGER.debug("QR-versjon %s for innhold %r", code.version, payload)
    else:
        _LOGGER.debug("QR-versjon %s for %d tegn", code.version, len(payload))
    return PaymentSymbol(payload=payload, code=code)


def payment_symbol(payment: Payment) -> PaymentSymbol:
    """Returnerer QR-symbol for bankoverføring."""

    return generate_symbol(encode_bank_transfer(payment))


def swish_symbol(payment: Payment, phone_number: str, *options: Option) -> PaymentSymbol:
    """Returnerer QR-symbol for Swish-betaling."""

    return generate_symbol(encode_swish(payment, phone_number, *options))
