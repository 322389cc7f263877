from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import NEPAL
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _fund_transfer(match) -> str:
    return "Fund Transfer (IBFT)" if "ibft" in match.string.lower() else "Fund Transfer"


class SiddharthaBankParser(BankParser):
    """
    Parser for Siddhartha Bank Limited (Nepal) SMS messages.
    """

    region = NEPAL
    senders = Senders(contains=("SBL", "SIDDHARTHA"))

    NOT_TRANSACTIONS = ("otp", "password", "verification code")
    KEYWORDS = ("withdrawn", "deposited", "fund trf", "fund transfer", "qr payment")

    AMOUNT = Cascade(amount(r"NPR\s+" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "withdrawn"),
        when(TransactionType.INCOME, "deposited", "credited"),
    )

    MERCHANT = Cascade(
        group(r"qr\s+payment\s+to\s+([^-\n]+?)(?:\s+-|$)"),
        label(r"\bnea\b", "Nepal Electricity Authority"),
        rule(r"fund\s+(?:trf|transfer)\s+(?:to|frm|from)\b", _fund_transfer, final=True),
        label(r"deposited", "Deposit"),
    )

    ACCOUNT = Cascade(group(r"AC\s+[X#]+(\d{4})"))

    REFERENCE = Cascade(
        rule(r"\(IN-(\d+)", lambda m: "IN-" + m.group(1), flags=0),
        group(r"IBFT:(\d+)", flags=0),
    )

    def get_bank_name(self) -> str:
        return "Siddhartha Bank"

    def can_handle(self, sender: str) -> bool:
        return super().can_handle(sender.replace("-", "_"))

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        return "npr" in lower and contains_any(lower, self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)
