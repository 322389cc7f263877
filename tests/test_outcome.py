import pytest

from smsledger.outcome import ParseOutcome, parse_message

SENDER = "IDBIBK"
TIMESTAMP = 1735700000000


@pytest.mark.parametrize(
    "sender, body, outcome",
    [
        ("QQ-ZZZZZZ", "INR 500.00 debited from A/c XX1234", ParseOutcome.NO_PARSER),
        (SENDER, "Your OTP is 123456. Do not share it.", ParseOutcome.NOT_TRANSACTION),
        (SENDER, "Your A/c XX1234 balance is INR 100.00", ParseOutcome.NOT_TRANSACTION),
        (SENDER, "Your A/c XX1234 has been debited towards a pending charge.", ParseOutcome.UNPARSEABLE),
        (SENDER, "INR 500.00 debited from A/c XX1234 to SWIGGY.", ParseOutcome.PARSED),
    ],
)
def test_each_message_gets_exactly_one_outcome(registry, sender, body, outcome):
    result = parse_message(registry, body, sender, TIMESTAMP)
    assert result.outcome is outcome
    assert result.parsed is (outcome is ParseOutcome.PARSED)
    assert (result.transaction is not None) is result.parsed


def test_bank_name_is_reported_once_a_parser_is_found(registry):
    assert parse_message(registry, "hello", "QQ-ZZZZZZ", TIMESTAMP).bank_name is None
    assert parse_message(registry, "hello", SENDER, TIMESTAMP).bank_name == "IDBI Bank"


def test_malformed_number_is_not_an_error(registry):
    result = parse_message(registry, "Rs. debited from A/c XX1234 to SHOP.", SENDER, TIMESTAMP)
    assert result.outcome is ParseOutcome.UNPARSEABLE
