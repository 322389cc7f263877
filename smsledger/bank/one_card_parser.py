from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, when
from smsledger.transaction_type import TransactionType


class OneCardParser(BankParser):
    """Parser for OneCard credit card SMS messages."""

    region = INDIA
    senders = Senders(contains=("ONECRD", "ONECARD"))

    EXTRA_VERBS = ("made a",)
    NOT_TRANSACTIONS = ("offer", "cashback offer", "get reward", "statement", "due date", "bill generated")

    AMOUNT = Cascade(
        amount(r"for\s+Rs\.?\s*" + NUMBER + r"\s+at"),
        amount(r"of\s+Rs\.?\s*" + NUMBER + r"\s+on"),
        amount(r"spent\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(
        group(r"\bat\s+([^•\n]+?)\s+on\s+card"),
        group(r"\bon\s+([^•\n]+?)\s+on\s+card"),
        group(r"\bat\s+([^•\n]+?)\s+on\b"),
    )

    ACCOUNT = Cascade(
        group(r"card\s+ending\s+X*(\d{4})"),
        group(r"on\s+card\s+X*(\d{4})"),
    )

    def get_bank_name(self) -> str:
        return "OneCard"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, self.NOT_TRANSACTIONS):
            return False
        if lower.startswith("you've") and "on card ending" in lower:
            return True
        return super().is_transaction_message(message)
