"""Dataklasser for betalingsinformasjon i QR-koder.

Feltene i :class:`Payment` er deklarert i samme rekkefølge som nøklene i
JSON-formatet fra qrkod.info, og hvert felt bærer sin JSON-nøkkel i
``metadata``. Serialiseringen i :mod:`payqr.bank_transfer` leser derfor
rekkefølgen direkte fra dataklassen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum, IntEnum, IntFlag
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from .constants import QR_SCHEMA_VERSION
from .helpers.dates import format_payment_date

if TYPE_CHECKING:
    from .symbol import PaymentSymbol

__all__ = [
    "Option",
    "Payment",
    "PaymentMethod",
    "SwishEditableField",
    "TransferType",
    "coerce_amount",
    "new_payment",
]


class TransferType(IntEnum):
    """Type overføring; avgjør hvilke felt som er påkrevd."""

    INVOICE = 1
    CREDIT_INVOICE = 2
    CASH_PAID_INVOICE = 3


class PaymentMethod(str, Enum):
    """Betalingssystem overføringen skal gå gjennom. Standard er Bankgiro."""

    IBAN = "IBAN"
    BBAN = "BBAN"
    BG = "BG"
    PG = "PG"


class SwishEditableField(IntFlag):
    """Felt mottakeren kan endre i Swish-appen etter skanning."""

    NONE = 0
    PHONE = 0b001
    AMOUNT = 0b010
    MESSAGE = 0b100


def _wire(key: str, *, omit_empty: bool = False, **kwargs: Any) -> Any:
    return field(metadata={"key": key, "omit_empty": omit_empty}, **kwargs)


def _today() -> str:
    return format_payment_date(date.today())


@dataclass
class Payment:
    """Data om én betaling som skal formidles via QR-kode."""

    schema_version: int = _wire("uqr", default=QR_SCHEMA_VERSION)
    transfer_type: TransferType = _wire("tp", default=TransferType.INVOICE)
    # Firmanavn for den sendende parten.
    name: str = _wire("nme", default="")
    company_id: str = _wire("cid", default="")
    credit_invoice_reference: str = _wire("cref", omit_empty=True, default="")
    reference: str = _wire("iref", default="")
    country_code: str = _wire("cc", omit_empty=True, default="")
    currency: str = _wire("cur", omit_empty=True, default="")
    vat: int = _wire("vat", omit_empty=True, default=0)
    high_vat: int = _wire("vh", omit_empty=True, default=0)
    medium_vat: int = _wire("vm", omit_empty=True, default=0)
    low_vat: int = _wire("vl", omit_empty=True, default=0)
    created_date: str = _wire("idt", default_factory=_today)
    due_date: str = _wire("ddt", default="")
    due_amount: Decimal = _wire("due", default=Decimal("0"))
    payment_method: PaymentMethod = _wire("pt", default=PaymentMethod.BG)
    account_number: str = _wire("acc", default="")
    bank_code: str = _wire("bc", omit_empty=True, default="")
    address: str = _wire("adr", omit_empty=True, default="")

    swish_editable_fields: SwishEditableField = SwishEditableField.NONE

    def has_required_fields(self) -> bool:
        """Sjekker om de påkrevde feltene for overføringstypen er satt.

        Resultatet er kun veiledende; koding blokkeres ikke av en ugyldig
        betaling.
        """

        if (
            self.schema_version < 1
            or not _is_transfer_type(self.transfer_type)
            or not self.name
            or not self.company_id
        ):
            return False

        if self.transfer_type == TransferType.CREDIT_INVOICE:
            return self.reference != ""
        if self.transfer_type == TransferType.INVOICE:
            # ddt, due, pt, acc
            return (
                self.due_date != ""
                or self.due_amount == 0
                or self.account_number != ""
            )

        return True

    def encode(self) -> str:
        """Returnerer JSON-teksten for bankoverføring."""

        from .bank_transfer import encode_bank_transfer

        return encode_bank_transfer(self)

    def swish_encode(self, phone_number: str, *options: Option) -> str:
        """Returnerer Swish-strengen for betalingen."""

        from .swish import encode_swish

        return encode_swish(self, phone_number, *options)

    def qr(self) -> "PaymentSymbol":
        """Returnerer en QR-kode for bankoverføring."""

        from .symbol import payment_symbol

        return payment_symbol(self)

    def swish_qr(self, phone_number: str, *options: Option) -> "PaymentSymbol":
        """Returnerer en QR-kode for Swish-betaling."""

        from .symbol import swish_symbol

        return swish_symbol(self, phone_number, *options)


Option = Callable[[Payment], None]


def _is_transfer_type(value: object) -> bool:
    try:
        TransferType(value)
    except ValueError:
        return False
    return True


def coerce_amount(value: Union[Decimal, int, float, str]) -> Decimal:
    """Gjør om et beløp til ``Decimal`` uten binære avrundingsfeil."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Ugyldig beløp: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Ugyldig beløp: {value!r}") from exc


def new_payment(
    account_number: str,
    name: str,
    company_id: str,
    reference: str,
    due_amount: Union[Decimal, int, float, str],
    due_date: Optional[Union[date, datetime]],
    *options: Option,
) -> Payment:
    """Oppretter en betaling med fornuftige standardverdier.

    Standardverdiene (versjon 1, fakturatype, dagens dato og Bankgiro) kan
    overstyres med ``options``, som brukes i angitt rekkefølge. Siste
    alternativ som rører et felt vinner.
    """

    payment = Payment(
        schema_version=QR_SCHEMA_VERSION,
        transfer_type=TransferType.INVOICE,
        name=name,
        company_id=company_id,
        reference=reference,
        created_date=_today(),
        due_date=format_payment_date(due_date),
        due_amount=coerce_amount(due_amount),
        payment_method=PaymentMethod.BG,
        account_number=account_number,
    )

    for option in options:
        option(payment)

    return payment
