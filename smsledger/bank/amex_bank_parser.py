from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType


class AMEXBankParser(BankParser):
    """
    Parser for American Express (AMEX) card SMS messages

    Every AMEX alert is a card spend, so the type is always CREDIT.
    """

    region = INDIA
    senders = Senders(contains=("AMEX", "AMEXIN"))

    NOT_TRANSACTIONS = ("offer", "reward", "membership", "statement", "due date")

    AMOUNT = Cascade(
        amount(r"spent\s+INR\s+" + NUMBER + r"\s+on"),
        amount(r"INR\s+" + NUMBER + r"\s+spent"),
    )

    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(group(r"\bat\s+([^•\n]+?)\s+on\s+\d{1,2}\s+\w+"))

    ACCOUNT = Cascade(
        rule(r"AMEX\s+card\s+\*+\s*(\d+)", lambda m: m.group(1)[-4:]),
        group(r"card\s+ending\s+(\d{4})"),
    )

    def get_bank_name(self) -> str:
        return "American Express"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)
