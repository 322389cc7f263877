from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _short(match):
    value = match.group(1)
    return value[-4:] if len(value) >= 4 else value


class IPPBParser(BankParser):
    """
    Parser for India Post Payments Bank (IPPB) SMS messages.
    """

    region = INDIA
    senders = Senders(patterns=(r"^[A-Z]{2}-IPBMSG-[ST]$",))

    EXTRA_VERBS = ("debit rs", "received a payment")

    AMOUNT = Cascade(amount(r"Rs\.?\s*" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debit"),
        when(TransactionType.INCOME, "received a payment"),
        when(TransactionType.INCOME, "info: upi/credit"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"\bto\s+(\S+)", lambda m: m.group(1).split("@")[0], requires=("debit",)),
        label(r"for\s+upi", "UPI Payment", requires=("debit",)),
        group(r"\bfrom\s+(.+?)\s+thru", requires=("received a payment",)),
    )

    ACCOUNT = Cascade(rule(r"A/C\s+X?(\d+)", _short))

    BALANCE = Cascade(amount(r"Avl\s+Bal\s+Rs\.?\s*" + NUMBER))

    REFERENCE = Cascade(
        group(r"\bRef\s+(\d+)"),
        group(r"Info:\s*UPI/[^/]+/(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "India Post Payments Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "info: upi" in lower and "credit" in lower:
            return True
        return super().is_transaction_message(message)
