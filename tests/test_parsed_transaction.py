from decimal import Decimal

import pytest

from smsledger.parsed_transaction import ParsedTransaction
from smsledger.transaction_type import TransactionType

BODY = "INR 500.00 debited from A/c XX1234 on 01-01-25 to SWIGGY. Avl Bal is INR 4,500.00"


def make(**overrides):
    fields = dict(
        amount=Decimal("500.00"),
        type=TransactionType.EXPENSE,
        sms_body=BODY,
        sender="IDBIBK",
        timestamp=1735700000000,
        bank_name="IDBI Bank",
    )
    fields.update(overrides)
    return ParsedTransaction(**fields)


def test_negative_amount_is_rejected():
    with pytest.raises(ValueError):
        make(amount=Decimal("-1"))


def test_amount_must_be_decimal():
    with pytest.raises(TypeError):
        make(amount=500.0)


def test_type_must_be_transaction_type():
    with pytest.raises(TypeError):
        make(type="EXPENSE")


def test_zero_amount_is_allowed():
    assert make(amount=Decimal("0")).amount == Decimal("0")


def test_record_is_immutable():
    record = make()
    with pytest.raises(AttributeError):
        record.amount = Decimal("1")


class TestTransactionId:
    def test_timestamp_does_not_change_the_id(self):
        assert make(timestamp=1).generate_transaction_id() == make(timestamp=2).generate_transaction_id()

    def test_amount_scale_is_normalized(self):
        assert make(amount=Decimal("500")).generate_transaction_id() == make().generate_transaction_id()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": Decimal("500.01")},
            {"sms_body": BODY + " "},
            {"sender": "AD-IDBIBK"},
        ],
    )
    def test_content_changes_the_id(self, overrides):
        assert make(**overrides).generate_transaction_id() != make().generate_transaction_id()

    def test_id_is_hex_md5(self):
        transaction_id = make().generate_transaction_id()
        assert len(transaction_id) == 32
        int(transaction_id, 16)


def test_to_dict_serializes_decimals_as_strings():
    row = make(balance=Decimal("4500.00"), credit_limit=None).to_dict()
    assert row["amount"] == "500.00"
    assert row["balance"] == "4500.00"
    assert row["credit_limit"] is None
    assert row["type"] == "EXPENSE"
    assert row["transaction_id"] == make().generate_transaction_id()
