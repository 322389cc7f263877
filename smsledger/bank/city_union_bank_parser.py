from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _masked(match):
    value = match.group(1)
    return "XX" + (value[-4:] if len(value) >= 4 else value)


def _short(match):
    value = match.group(1)
    return value[-4:] if len(value) >= 4 else value


class CityUnionBankParser(BankParser):
    """
    Parser for City Union Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("CUBANK", "CUBLTD", "CUB"))

    EXTRA_VERBS = ("neft trf",)
    NOT_TRANSACTIONS = ("verification", "request")

    AMOUNT = Cascade(
        amount(r"(?:debited|credited)\s+for\s+Rs\.?\s*" + NUMBER),
        amount(r"credited\s+with\s+INR\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "is debited", "debited for", "debited from"),
        when(TransactionType.INCOME, "is credited", "credited for", "credited with", "credited to", "neft trf"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"BY\s+NEFT\s+TRF:([^:]+)", lambda m: "NEFT - " + m.group(1).strip()),
        label(r"neft\s+trf", "NEFT Transfer"),
        rule(r"credited\s+to\s+a/c\s+no\.\s+([A-Z0-9]+)", lambda m: "UPI Transfer to A/C " + _masked(m), requires=("upi ref",)),
        rule(r"debited\s+from\s+a/c\s+no\.\s+([A-Z0-9]+)", lambda m: "UPI Transfer from A/C " + _masked(m), requires=("upi ref",)),
        label(r"upi\s+ref", "UPI Transfer"),
        label(r"credited\s+to\s+a/c|debited\s+from\s+a/c", "Account Transfer"),
    )

    ACCOUNT = Cascade(
        rule(r"Your\s+a/c\s+no\.\s+X*(\d{3,4})", _short),
        rule(r"Savings\s+No\s+X*(\d{3,4})", _short),
    )

    BALANCE = Cascade(amount(r"Avl\s+Bal\s+" + NUMBER))

    REFERENCE = Cascade(
        group(r"\(UPI\s+Ref\s+no\s+(\d+)\)"),
        group(r"NEFT[:/]\s*([A-Z0-9]+)"),
    )

    def get_bank_name(self) -> str:
        return "City Union Bank"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)
