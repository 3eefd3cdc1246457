"""Genererer en enkel PDF-betalingsblankett med QR-koder."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from .helpers.dates import parse_payment_date
from .helpers.formatting import format_display_amount
from .models import Payment, SwishEditableField, TransferType
from .swish import with_editable_fields
from .symbol import payment_symbol, swish_symbol

__all__ = ["export_payment_slip"]

_LOGGER = logging.getLogger(__name__)

_QR_SIZE = 60 * mm
_QR_PIXELS = 512

_TRANSFER_LABELS = {
    TransferType.INVOICE: "Faktura",
    TransferType.CREDIT_INVOICE: "Kreditfaktura",
    TransferType.CASH_PAID_INVOICE: "Kontantfaktura",
}


def export_payment_slip(
    payment: Payment,
    file_name: Union[str, Path],
    *,
    swish_phone: Optional[str] = None,
    editable: SwishEditableField = SwishEditableField.NONE,
) -> Path:
    """Skriv en betalingsblankett med QR-kode for bankoverføring.

    Med ``swish_phone`` legges også en Swish-kode til.
    """

    styles = getSampleStyleSheet()
    title_style = styles["Title"]
    heading_style = styles["Heading2"]

    path = Path(file_name)
    doc = SimpleDocTemplate(
        str(path),
        pagesize=A4,
        leftMargin=18 * mm,
        rightMargin=18 * mm,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
    )

    story: List[object] = [
        Paragraph(f"Betalning – {escape(payment.name) or '—'}", title_style),
        Spacer(1, 6 * mm),
        _key_value_table(_payment_rows(payment)),
        Spacer(1, 6 * mm),
        Paragraph("Bankgiro/Plusgiro/IBAN", heading_style),
        _qr_image(payment_symbol(payment).to_image(_QR_PIXELS)),
    ]

    if swish_phone is not None:
        symbol = swish_symbol(payment, swish_phone, with_editable_fields(editable))
        story.append(Spacer(1, 6 * mm))
        story.append(Paragraph("Swish", heading_style))
        story.append(_qr_image(symbol.to_image(_QR_PIXELS)))

    doc.build(story)
    _LOGGER.info("Skrev betalingsblankett til %s", path)
    return path


def _payment_rows(payment: Payment) -> List[Tuple[str, str]]:
    rows: List[Tuple[str, str]] = [
        ("Typ", _TRANSFER_LABELS.get(payment.transfer_type, str(payment.transfer_type))),
        ("Mottagare", payment.name),
        ("Org.nr", payment.company_id),
        ("Referens", payment.reference),
    ]
    if payment.credit_invoice_reference:
        rows.append(("Krediterad faktura", payment.credit_invoice_reference))
    rows.append(("Konto", f"{_method_label(payment)} {payment.account_number}".strip()))
    if payment.bank_code:
        rows.append(("Bankkod", payment.bank_code))
    rows.append(("Belopp", format_display_amount(payment.due_amount, payment.currency or "SEK")))
    rows.append(("Förfallodag", _format_date(payment.due_date)))
    rows.append(("Fakturadatum", _format_date(payment.created_date)))
    if payment.address:
        rows.append(("Adress", payment.address))
    if payment.country_code:
        rows.append(("Land", payment.country_code))
    return rows


def _method_label(payment: Payment) -> str:
    method = payment.payment_method
    return getattr(method, "value", str(method))


def _format_date(value: str) -> str:
    parsed = parse_payment_date(value) if value else None
    if parsed is None:
        return value or "—"
    return parsed.isoformat()


def _key_value_table(rows: Sequence[Tuple[str, str]]) -> Table:
    table = Table([tuple(row) for row in rows], hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("GRID", (0, 0), (-1, -1), 0.3, colors.grey),
            ]
        )
    )
    return table


def _qr_image(png: bytes) -> Image:
    return Image(BytesIO(png), width=_QR_SIZE, height=_QR_SIZE)
