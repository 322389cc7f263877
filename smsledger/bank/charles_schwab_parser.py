from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, when
from smsledger.transaction_type import TransactionType

# Longer symbols first so "C$" is not read as "$"
SYMBOL_CURRENCIES = (
    ("C$", "CAD"), ("A$", "AUD"), ("S$", "SGD"), ("$", "USD"),
    ("€", "EUR"), ("£", "GBP"), ("₹", "INR"), ("¥", "JPY"), ("฿", "THB"), ("₩", "KRW"),
)

_DEBITED = ("debit card transaction", "atm transaction", "ach transaction", "ach was debited", "was debited")
_CHANNEL = r"\s+(?:(?:debit\s+card|ATM|ACH)\s+transaction|ACH\s+was\s+debited)"


class CharlesSchwabParser(BankParser):
    """
    Parser for Charles Schwab Bank - handles USD debit card and ATM transactions.
    """

    region = UNITED_STATES
    senders = Senders(
        exact=("SCHWAB", "24465"),
        contains=("CHARLES SCHWAB", "SCHWAB BANK"),
        dlt_codes=("SCHWAB",),
    )

    EXTRA_VERBS = (
        "debit card transaction was debited", "atm transaction was debited", "ach was debited",
        "transaction was debited from account",
    )

    AMOUNT = Cascade(
        amount(r"\bA\s+[A-Z]?\$\s*" + NUMBER + _CHANNEL),
        amount(r"\bA\s+[€£₹¥฿₩]\s*" + NUMBER + _CHANNEL),
        amount(r"\bA\s+[A-Z]{3}\s*" + NUMBER + _CHANNEL),
    )

    TYPES = DecisionTable(when(TransactionType.EXPENSE, *_DEBITED))

    ACCOUNT = Cascade(
        group(r"account\s+ending\s+(\d{4})"),
        group(r"account.*ending\s+(\d{4})"),
    )

    def get_bank_name(self) -> str:
        return "Charles Schwab"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "reply stop to end" in lower and "transaction" not in lower and "debited" not in lower:
            return False
        return super().is_transaction_message(message)

    def extract_currency(self, message: str) -> Optional[str]:
        for symbol, code in SYMBOL_CURRENCIES:
            if symbol in message:
                return code
        return super().extract_currency(message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        if "debit card transaction" in lower or "atm transaction" in lower:
            return True
        if "ach transaction" in lower:
            return False
        return super().detect_is_card(message)
