import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import TANZANIA_MOBILE
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType

_COUNTERPART_SUFFIX = re.compile(r"\s+-\s+.*$")


def _atm(match) -> str:
    location = match.group(1).strip()
    return "ATM - " + location if location else "ATM Withdrawal"


class SelcomPesaParser(BankParser):
    """
    Parser for Selcom Pesa (Tanzania) mobile money SMS messages.

    Counterparts are written ``NAME - BANK (account)``; only the name is kept.
    """

    region = TANZANIA_MOBILE
    senders = Senders(contains=("SELCOM",))

    KEYWORDS = ("you have received", "you have sent", "you have paid", "you have withdrawn", "updated balance")

    AMOUNT = Cascade(amount(r"TZS\s+" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "you have received"),
        when(TransactionType.EXPENSE, "you have sent", "you have paid", "you have withdrawn"),
    )

    MERCHANT = Cascade(
        group(r"from\s+([A-Z][A-Za-z\s]+?)(?:\s+-\s+[^(]+)?\s*\([^)]+\)"),
        group(r"to\s+([A-Z][A-Za-z\s]+?)(?:\s+-\s+[^(]+)?\s*\([^)]+\)"),
        group(r"paid\s+TZS\s+[0-9,]+(?:\.[0-9]{2})?\s+to\s+([A-Za-z0-9\s]+?)(?:\s+using|\s+on)"),
        rule(r"at\s+ATM\s*-?\s*([^u]*?)(?:\s+using|$)", _atm, requires=("withdrawn", "atm")),
        group(r"to\s+([A-Z][A-Za-z\s]+?)(?:\s+on\s+|\s*$)"),
    )

    ACCOUNT = Cascade(group(r"card\s+ending\s+(?:with\s+)?(\d{4})"))

    BALANCE = Cascade(amount(r"Updated\s+balance\s+is\s+TZS\s+" + NUMBER))

    REFERENCE = Cascade(
        group(r"^([A-Z0-9]{8,9})\s+(?:Confirmed|Accepted)"),
        group(r"TIPS\s+Reference[:\s]+([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "Selcom Pesa"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "confirmed" not in lower and "accepted" not in lower:
            return False
        return contains_any(lower, self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        merchant = self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)
        if merchant is None and "withdrawn" in message.lower() and "ATM" in message.upper():
            return "ATM Withdrawal"
        return merchant

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)

    def detect_is_card(self, message: str) -> bool:
        return contains_any(message.lower(), ("card ending", "using your card"))

    def clean_merchant_name(self, merchant: str) -> str:
        return super().clean_merchant_name(_COUNTERPART_SUFFIX.sub("", merchant))
