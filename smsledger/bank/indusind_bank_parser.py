from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when, words
from smsledger.transaction_type import TransactionType

_ACH = ("ach db", "ach cr", "nach")


def _handle(match) -> Optional[str]:
    token = match.group(1).strip().rstrip(".,;)")
    token = token.split("/")[0]
    return token.split("@")[0].strip() or None


def _vpa_only(match) -> Optional[str]:
    token = match.group(1).strip().rstrip(".,;")
    if "@" not in token:
        return None
    return _handle(match)


def _short(match):
    value = match.group(1)
    return value[-4:] if len(value) >= 4 else value


class IndusIndBankParser(BankParser):
    """
    Parser for IndusInd Bank SMS messages.

    Deposit, FD and ACH wording is investment activity. ACH/NACH debits are
    never card transactions and carry no account suffix worth reporting.
    """

    region = INDIA
    senders = Senders(
        exact=("INDUSB", "INDUSIND"),
        contains=("INDUSIND BANK",),
        dlt_codes=("INDUSB", "INDUSIND"),
        patterns=(r"^[A-Z]{2}-INDUS(?:[A-Z]{2,})?-[A-Z]$",),
    )

    AMOUNT = Cascade(
        amount(r"(?:INR|Rs\.?|₹)\s*" + NUMBER + r"\s+(?:debited|credited|spent|withdrawn|paid|purchase)"),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "spent", "debited", "purchase"),
        when(TransactionType.INVESTMENT, words("deposit", "fd", "ach")),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"towards\s+(\S+)", _handle),
        rule(r"from\s+account\s+[^\s/]+/([^\s(]+)", _handle),
        rule(r"\bfrom\s+(\S+)", _vpa_only),
        group(r"\bat\s+([^\n]+?)(?:\s+Ref|\s+on|$)"),
        group(r"/(?!\s)([^/.\s]+)\.\s*Bal"),
    )

    ACCOUNT = Cascade(
        group(r"IndusInd\s+Account\s+\d+X+(\d{4})"),
        group(r"account\s+X{5,}(\d{4})"),
        rule(r"A/?C\s+\d{2,}[*xX#]+(\d{4,})", _short),
        rule(r"A/?c\s+\*?X+\s*(\d{4,6})", _short),
    )

    BALANCE = Cascade(
        amount(r"Avl\s*BAL\s+of\s+INR\s*" + NUMBER),
        amount(r"(?:Avl\s*BAL|Available\s+Balance(?:\s+is)?|Bal)[:\s]+INR\s*" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"RRN[:\s]+(\d+)"),
        group(r"(?:IMPS\s+)?Ref\s+no\.?\s*(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "IndusInd Bank"

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def detect_is_card(self, message: str) -> bool:
        if contains_any(message.lower(), _ACH):
            return False
        return super().detect_is_card(message)

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "net interest" in lower and "deposit no" in lower:
            return False
        return super().is_transaction_message(message)
