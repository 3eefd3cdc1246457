from __future__ import annotations

import json
import logging
from datetime import date

import pandas as pd

from payqr.batch import encode_frame, payments_from_frame
from payqr.models import PaymentMethod, SwishEditableField, TransferType
from payqr.options import with_creation_date


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "account_number": ["5536-7742", "DK4830004073013895"],
            "name": ["Test AB", "Test company AB"],
            "company_id": ["1234", "555555-5555"],
            "reference": ["1001", "934000000000159"],
            "amount": ["50,00", "10,75"],
            "due_date": ["2022-08-06", "15.02.2012"],
            "payment_method": [None, "IBAN"],
            "currency": [None, "DKK"],
            "country_code": [None, "SE"],
            "bank_code": [None, "DABADKKK"],
            "address": [None, "1092 Köpenhamn"],
        }
    )


def test_payments_from_frame_builds_one_payment_per_row() -> None:
    payments = payments_from_frame(_frame(), options=[with_creation_date(date(2022, 7, 7))])

    assert len(payments) == 2
    domestic, foreign = payments
    assert domestic.payment_method is PaymentMethod.BG
    assert domestic.due_date == "20220806"
    assert str(domestic.due_amount) == "50.00"
    assert foreign.payment_method is PaymentMethod.IBAN
    assert foreign.currency == "DKK"
    assert foreign.country_code == "SE"
    assert foreign.bank_code == "DABADKKK"
    assert foreign.address == "1092 Köpenhamn"
    assert foreign.due_date == "20120215"


def test_encode_frame_adds_payload_and_valid_columns() -> None:
    frame = _frame()

    result = encode_frame(frame, options=[with_creation_date(date(2022, 7, 7))])

    assert "payload" not in frame.columns
    assert list(result["valid"]) == [True, True]
    assert result.loc[0, "payload"] == (
        '{"uqr":1,"tp":1,"nme":"Test AB","cid":"1234","iref":"1001",'
        '"idt":"20220707","ddt":"20220806","due":50,"pt":"BG","acc":"5536-7742"}'
    )
    assert json.loads(result.loc[1, "payload"])["due"] == 10.75


def test_encode_frame_with_swish_phone() -> None:
    result = encode_frame(
        _frame(),
        swish_phone="1231111111",
        editable=SwishEditableField.AMOUNT | SwishEditableField.MESSAGE,
    )

    assert list(result["payload"]) == [
        "C1231111111;50.00;1001;6",
        "C1231111111;10.75;934000000000159;6",
    ]


def test_custom_column_mapping_and_row_options() -> None:
    frame = pd.DataFrame(
        {
            "Konto": ["5536-7742"],
            "Namn": ["Test AB"],
            "Orgnr": ["1234"],
            "Referens": [""],
            "Belopp": [1234.5],
            "Förfallodag": [pd.Timestamp("2022-08-06")],
            "Fakturadatum": ["2022-07-07"],
            "transfer_type": [2],
            "credit_reference": ["999"],
            "vat": ["25"],
        }
    )

    payments = payments_from_frame(
        frame,
        columns={
            "account_number": "Konto",
            "name": "Namn",
            "company_id": "Orgnr",
            "reference": "Referens",
            "amount": "Belopp",
            "due_date": "Förfallodag",
            "created_date": "Fakturadatum",
        },
    )

    payment = payments[0]
    assert payment.transfer_type is TransferType.CREDIT_INVOICE
    assert payment.credit_invoice_reference == "999"
    assert payment.vat == 25
    assert payment.created_date == "20220707"
    assert payment.due_date == "20220806"
    assert str(payment.due_amount) == "1234.5"
    assert payment.has_required_fields() is False


def test_unparseable_values_are_logged(caplog) -> None:
    frame = pd.DataFrame(
        {
            "account_number": ["5536-7742"],
            "name": ["Test AB"],
            "company_id": ["1234"],
            "reference": ["1001"],
            "amount": ["femtio 50"],
            "due_date": ["snart"],
        }
    )

    with caplog.at_level(logging.WARNING, logger="payqr.batch"):
        payments = payments_from_frame(frame)

    assert payments[0].due_amount == 0
    assert payments[0].due_date == ""
    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "beløpet" in messages
    assert "forfallsdato" in messages


def test_unknown_transfer_type_is_logged_and_skipped(caplog) -> None:
    frame = pd.DataFrame(
        {
            "account_number": ["5536-7742", "5536-7742"],
            "name": ["Test AB", "Test AB"],
            "company_id": ["1234", "1234"],
            "reference": ["1001", "1002"],
            "amount": ["50", "75"],
            "due_date": ["2022-08-06", "2022-08-06"],
            "transfer_type": ["Invoice", "2.5"],
        }
    )

    with caplog.at_level(logging.WARNING, logger="payqr.batch"):
        payments = payments_from_frame(frame)

    assert [payment.transfer_type for payment in payments] == [
        TransferType.INVOICE,
        TransferType.INVOICE,
    ]
    messages = [record.getMessage() for record in caplog.records]
    assert sum("overføringstype" in message for message in messages) == 2
