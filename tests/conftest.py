import sys
from datetime import date
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from payqr.models import Payment, PaymentMethod, new_payment  # noqa: E402
from payqr.options import (  # noqa: E402
    with_address,
    with_bank_code,
    with_country_code,
    with_creation_date,
    with_currency,
    with_payment_type,
)


@pytest.fixture
def domestic_payment() -> Payment:
    return new_payment(
        "5536-7742",
        "Test AB",
        "1234",
        "1001",
        50,
        date(2022, 8, 6),
        with_creation_date(date(2022, 7, 7)),
        with_payment_type("BG"),
    )


@pytest.fixture
def foreign_payment() -> Payment:
    return new_payment(
        "DK4830004073013895",
        "Test company AB",
        "555555-5555",
        "934000000000159",
        10.75,
        date(2012, 2, 15),
        with_creation_date(date(2012, 2, 15)),
        with_payment_type(PaymentMethod.IBAN),
        with_currency("DKK"),
        with_address("1092 Köpenhamn"),
        with_country_code("SE"),
        with_bank_code("DABADKKK"),
    )
