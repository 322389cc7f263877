from decimal import Decimal

import pytest

from smsledger.bank import mandate

E_MANDATE = (
    "E-mandate towards NETFLIX from A/c XX1234 for Rs 499.00 created successfully. "
    "Next debit on 05-02-25. UMN: NFLX12345"
)
FUTURE_DEBIT = "Rs 1,500.00 will be debited from your A/c XX1234 on 10-01-25 towards LIC PREMIUM."


@pytest.fixture
def idbi(registry):
    return registry.resolve("IDBIBK")


def test_e_mandate_is_parsed_into_mandate_info(idbi):
    assert idbi.parse(E_MANDATE, "IDBIBK", 0) is None
    info = idbi.parse_mandate_subscription(E_MANDATE)
    assert info.amount == Decimal("499.00")
    assert info.merchant == "NETFLIX"
    assert info.next_deduction_date == "05-02-25"
    assert info.date_format == "dd-MM-yy"
    assert info.umn == "NFLX12345"


def test_future_debit_notice(idbi):
    assert idbi.is_mandate_notification(FUTURE_DEBIT)
    info = idbi.parse_mandate_subscription(FUTURE_DEBIT)
    assert info.amount == Decimal("1500.00")
    assert info.merchant == "LIC PREMIUM"
    assert info.next_deduction_date == "10-01-25"
    assert info.umn is None


def test_ordinary_debit_is_not_a_mandate(idbi):
    body = "INR 500.00 debited from A/c XX1234 to SWIGGY."
    assert not idbi.is_mandate_notification(body)
    assert idbi.parse_mandate_subscription(body) is None


def test_regions_without_mandates(registry):
    navy = registry.resolve("NFCU")
    assert navy.parse_mandate_subscription(FUTURE_DEBIT) is None
    assert not navy.is_mandate_notification(FUTURE_DEBIT)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("05-Jan-25", "dd-MMM-yy"),
        ("05/01/2025", "dd/MM/yyyy"),
        ("5-1-25", "dd-MM-yy"),
    ],
)
def test_date_format_of(text, expected):
    assert mandate.date_format_of(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("05-Jan-25", (2025, 1, 5)),
        ("05/01/2025", (2025, 1, 5)),
        ("5 Dec 2024", (2024, 12, 5)),
        ("31/02/2025", None),
        ("05-Foo-25", None),
        ("garbage", None),
    ],
)
def test_parse_date(text, expected):
    parsed = mandate.parse_date(text)
    if expected is None:
        assert parsed is None
    else:
        assert (parsed.year, parsed.month, parsed.day) == expected


def test_balance_ping_needs_no_transaction_verb():
    assert mandate.is_balance_update_notification("Avl Bal in A/c XX1234 is Rs 200.00")
    assert not mandate.is_balance_update_notification("Rs 50 debited. Avl Bal Rs 200.00")
