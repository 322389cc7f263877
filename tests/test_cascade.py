import re
from decimal import Decimal

import pytest

from smsledger.cascade import (
    NUMBER,
    Cascade,
    DecisionTable,
    amount,
    contains_any,
    group,
    label,
    rule,
    scan,
    to_decimal,
    when,
    words,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1,234.50", Decimal("1234.50")),
        ("12,00,000", Decimal("1200000")),
        ("500.", Decimal("500")),
        (" 42 ", Decimal("42")),
        ("", None),
        (None, None),
        ("1.2.3", None),
        ("abc", None),
        ("NaN", None),
        ("Infinity", None),
    ],
)
def test_to_decimal(raw, expected):
    assert to_decimal(raw) == expected


def test_number_token_stops_at_two_decimals():
    match = re.search(NUMBER, "Rs 1,234.567")
    assert match.group(1) == "1,234.56"


def test_group_strips_and_treats_empty_as_no_match():
    assert group(r"to\s+(.*?)\.").apply("paid to  SWIGGY .") == "SWIGGY"
    assert group(r"to(\s*)\.").apply("to .") is None


def test_amount_rule_ignores_malformed_numbers():
    assert amount(r"Rs\s*([\d.]+)").apply("Rs 1.2.3") is None
    assert amount(r"Rs\s*" + NUMBER).apply("rs 99.90") == Decimal("99.90")


def test_label_and_rule():
    assert label(r"\bATM\b", "ATM").apply("cash at atm") == "ATM"
    assert rule(r"card (\d+)", lambda m: m.group(1)[-4:]).apply("card 12345678") == "5678"


def test_requires_gates_the_rule():
    only_upi = group(r"to (\w+)", requires=("upi",))
    assert only_upi.apply("sent to BOB") is None
    assert only_upi.apply("sent to BOB via UPI") == "BOB"

    either = group(r"to (\w+)", requires=(("neft", "imps"),))
    assert either.apply("IMPS to ALICE") == "ALICE"
    assert either.apply("RTGS to ALICE") is None


def test_scan_skips_matches_that_extract_nothing():
    pick_long = scan(r"(\d+)", lambda m: m.group(1) if len(m.group(1)) >= 4 else None)
    assert pick_long.apply("ref 12 then 345 then 6789") == "6789"
    plain = rule(r"(\d+)", lambda m: m.group(1) if len(m.group(1)) >= 4 else None)
    assert plain.apply("ref 12 then 345 then 6789") is None


class TestCascade:
    cascade = Cascade(
        group(r"at\s+(\w+)"),
        group(r"to\s+(\w+)"),
    )

    def test_first_match_wins(self):
        assert self.cascade("paid to ALICE at SHOP") == "SHOP"

    def test_fallback_only_when_nothing_matches(self):
        assert self.cascade("nothing here", fallback=lambda text: "fallback") == "fallback"
        assert self.cascade("to ALICE", fallback=lambda text: "fallback") == "ALICE"

    def test_transform_and_accept_move_on_to_next_rule(self):
        value = self.cascade("at X to ALICE", transform=str.lower, accept=lambda name: len(name) > 1)
        assert value == "alice"

    def test_transform_returning_none_is_rejected(self):
        assert self.cascade("at X", transform=lambda value: None) is None

    def test_concatenation_keeps_order(self):
        combined = Cascade(label(r"upi", "UPI")) + self.cascade
        assert len(combined) == 3
        assert combined("upi to ALICE") == "UPI"
        assert list(combined)[1:] == list(self.cascade)

    def test_final_rules_skip_transform_and_accept(self):
        cascade = Cascade(
            label(r"credited\s+to\s+account", "Account Credit"),
            group(r"to\s+(a/c\s+XX\d+)", final=True),
            rule(r"at\s+(\w+)", lambda m: m.group(1), final=True),
        )
        reject_all = dict(transform=str.lower, accept=lambda value: False)

        assert cascade("has been credited to account 095XX", **reject_all) == "Account Credit"
        assert cascade("debited and sent to a/c XX1465", **reject_all) == "a/c XX1465"
        assert cascade("spent at Bob", **reject_all) == "Bob"

    def test_empty_cascade(self):
        assert Cascade()("anything") is None


class TestDecisionTable:
    table = DecisionTable(
        when("card", "spent", all_of=(("credit card", "avl limit"),), unless=("refund",)),
        when("expense", "debited", "spent"),
        when("income", "credited", unless=("credited to your card",)),
    )

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("INR 10 spent on credit card", "card"),
            ("INR 10 spent. Avl Limit INR 5", "card"),
            ("INR 10 spent, refund initiated, credit card", "expense"),
            ("INR 10 debited", "expense"),
            ("INR 10 CREDITED to a/c", "income"),
            ("INR 10 credited to your card", None),
            ("hello", None),
        ],
    )
    def test_rows_in_order(self, text, expected):
        assert self.table(text) == expected

    def test_fallback(self):
        assert self.table("hello", fallback=lambda text: "other") == "other"

    def test_catch_all_row(self):
        assert DecisionTable(when("always"))("anything") == "always"

    def test_none_row_blocks_later_rows(self):
        table = DecisionTable(when(None, "declined")) + DecisionTable(when("expense", "debited"))
        assert table("debited") == "expense"
        assert table("debit declined") is None


def test_words_matches_whole_words_only():
    pattern = words("ach", "nse")
    assert pattern.search("NACH ach debit") is not None
    assert pattern.search("payment reached you") is None
    assert pattern.search("monthly expense") is None


def test_contains_any_accepts_patterns_and_tuples():
    assert contains_any("paid via upi", ("neft", re.compile(r"\bupi\b")))
    assert contains_any("imps done", (("neft", "imps"),))
    assert not contains_any("cash", ("upi", "neft"))
