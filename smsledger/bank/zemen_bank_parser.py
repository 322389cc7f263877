from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import ETHIOPIA
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, group, rule, to_decimal, when
from smsledger.transaction_type import TransactionType

BIRR_NUMBER = r"([0-9,]+(?:\.[0-9]{1,2})?)"
_CENTS = Decimal("0.01")


def in_cents(match) -> Optional[Decimal]:
    """Birr amount rounded half-up to whole cents."""
    value = to_decimal(match.group(1))
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP) if value is not None else None


class ZemenBankParser(BankParser):
    """
    Parser for Zemen Bank - handles ETB currency transactions.
    """

    region = ETHIOPIA
    senders = Senders(exact=("ZEMENBANK",), dlt_codes=("ZEMENBANK",))

    EXTRA_VERBS = (
        "dear customer", "your account", "fund transfer has been made from",
        "pos transaction has been made from", "atm cash withdrawal has been made from",
        "current balance", "available bal.", "thank you for banking with zemen bank", "etb", "birr",
    )

    AMOUNT = Cascade(rule(r"(?:ETB|Birr)\s+" + BIRR_NUMBER, in_cents))

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "has been credited", "credited with"),
        when(TransactionType.EXPENSE, "has been debited", "debited with"),
        when(
            TransactionType.EXPENSE,
            "fund transfer has been made from", "pos transaction has been made from",
            "atm cash withdrawal has been made from", "you have transfered", "you have transferred",
        ),
        when(TransactionType.EXPENSE, "transferred", all_of=("from a/c",)),
    ) + ETHIOPIA.TYPES

    MERCHANT = Cascade(
        group(r"from\s+(telebirr\s+wallet\s+\d+)\s+with\s+reference"),
        group(r"to\s+(telebirr\s+wallet\s+\d+)\s+with\s+reference"),
        group(r"to\s+A/c\s+of\s+(\d{6,})"),
        group(r"from\s+([^,.]+?)\s+with\s+reference"),
        group(r"pos\s+purchase\s+transaction\s+at\s+(.+?)\s+on\s+\d{1,2}-[A-Za-z]{3}-\d{4}"),
        group(r"transaction\s+POS\s+location\s+is\s+(.+?)\s*\.\s"),
        group(r"to\s+(.+?)\s+with\s+reference"),
        group(r"transaction\s+ATM\s+location\s+is\s+(.+?)\s*\.\s"),
    )

    ACCOUNT = Cascade(group(r"\b\d{3}x+(\d{4})\b"))

    BALANCE = Cascade(
        rule(r"Your\s+Current\s+Balance\s+is\s+(?:ETB|Birr)\s+" + BIRR_NUMBER, in_cents),
        rule(r"A/c\s+Available\s+Bal\.\s+is\s+(?:ETB|Birr)\s+" + BIRR_NUMBER, in_cents),
        rule(r"Your\s+available\s+balance\s+is\s+(?:ETB|Birr)\s+" + BIRR_NUMBER, in_cents),
    )

    REFERENCE = Cascade(
        group(r"transaction\s+reference\s+number\s+is\s+([A-Z0-9]+)"),
        group(r"with\s+reference\s+([A-Z0-9]+)"),
        group(r"(https://share\.zemenbank\.com/\S+?/pdf)"),
    )

    def get_bank_name(self) -> str:
        return "Zemen Bank"

    def can_handle(self, sender: str) -> bool:
        return super().can_handle(sender.replace(" ", "")) or super().can_handle(sender)
