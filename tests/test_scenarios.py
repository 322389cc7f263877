"""End-to-end behaviour of the default registry on representative alerts."""
from datetime import datetime
from decimal import Decimal

import pytest

from smsledger.transaction_type import TransactionType

SENDER = "IDBIBK"

DEBIT = "INR 500.00 debited from A/c XX1234 on 01-01-25 to SWIGGY. Avl Bal is INR 4,500.00"
CARD_SPEND = "INR 1,200.00 spent on your credit card XX4321 at AMAZON on 05-01-25. Avl Limit: INR 50,000.00"
BALANCE_ONLY = "Your A/c XX1234 balance is INR 12,345.67 as on 05-01-25."


def test_debit_with_balance(parse):
    txn = parse(SENDER, DEBIT)
    assert txn is not None
    assert txn.amount == Decimal("500.00")
    assert txn.type is TransactionType.EXPENSE
    assert txn.merchant.lower() == "swiggy"
    assert txn.account_last4 == "1234"
    assert txn.balance == Decimal("4500.00")
    assert txn.currency == "INR"
    assert txn.bank_name == "IDBI Bank"
    assert txn.is_from_card is False
    assert txn.credit_limit is None


def test_same_message_seen_twice_has_one_id(parse):
    first = parse(SENDER, DEBIT, timestamp=1735700000000)
    second = parse(SENDER, DEBIT, timestamp=1735700099999)
    assert first.timestamp != second.timestamp
    assert first.generate_transaction_id() == second.generate_transaction_id()


def test_otp_is_not_a_transaction(parse):
    body = "OTP is 482910, do not share it with anyone. Txn of INR 500.00 at AMAZON debited from A/c XX1234"
    assert parse(SENDER, body) is None


def test_credit_card_spend(parse):
    txn = parse(SENDER, CARD_SPEND)
    assert txn.type is TransactionType.CREDIT
    assert txn.is_from_card is True
    assert txn.amount == Decimal("1200.00")
    assert txn.credit_limit == Decimal("50000.00")


def test_balance_only_message(registry, parse):
    assert parse(SENDER, BALANCE_ONLY) is None

    parser = registry.resolve(SENDER)
    assert parser.is_balance_update_notification(BALANCE_ONLY)
    info = parser.parse_balance_update(BALANCE_ONLY)
    assert info is not None
    assert info.bank_name == "IDBI Bank"
    assert info.balance == Decimal("12345.67")
    assert info.account_last4 == "1234"
    assert info.as_of_date == datetime(2025, 1, 5)


@pytest.mark.parametrize("body", [DEBIT, CARD_SPEND, BALANCE_ONLY])
def test_parsing_is_deterministic(parse, body):
    assert parse(SENDER, body) == parse(SENDER, body)


@pytest.mark.parametrize(
    "body",
    [
        "482910 is your OTP for a txn of INR 2,000.00 at FLIPKART. Do not share it with anyone.",
        "Get a cashback offer of Rs 100 when you pay with your IDBI debit card. T&C apply.",
        "E-mandate for Rs 499.00 towards NETFLIX has been successfully created on A/c XX1234.",
        "Rs 1,500.00 will be debited from your A/c XX1234 on 10-01-25 towards LIC PREMIUM.",
        "RAHUL has requested Rs 250.00 from you. Approve on your UPI app.",
        BALANCE_ONLY,
    ],
)
def test_non_transactions_are_rejected(parse, body):
    assert parse(SENDER, body) is None


@pytest.mark.parametrize(
    "body",
    [
        "Rs.1,234.50 debited from A/c XX1234 to ZOMATO.",
        "INR 1234.50 debited from A/c XX1234 to ZOMATO.",
        "₹ 1234.50 debited from A/c XX1234 to ZOMATO.",
        "Rs 1,234.50 debited from A/c XX1234 to ZOMATO.",
    ],
)
def test_amount_is_independent_of_formatting(parse, body):
    txn = parse(SENDER, body)
    assert txn.amount == Decimal("1234.50")
    assert txn.type is TransactionType.EXPENSE


def test_investment_keywords_win_over_debit_wording(parse):
    txn = parse(SENDER, "INR 5,000.00 debited from A/c XX1234 towards ZERODHA BROKING for SIP.")
    assert txn.type is TransactionType.INVESTMENT


def test_investment_keywords_match_whole_words(parse):
    txn = parse(SENDER, "INR 300.00 debited from A/c XX1234 for monthly expense. Amount reached merchant.")
    assert txn.type is TransactionType.EXPENSE


def test_missing_amount_suppresses_the_record(parse):
    assert parse(SENDER, "Your A/c XX1234 has been debited towards a pending charge.") is None
