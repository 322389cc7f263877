from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import ETHIOPIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _unstarred(match):
    return match.group(1).replace("*", "").strip() or None


class CBEBankParser(BankParser):
    """
    Parser for Commercial Bank of Ethiopia (CBE) - handles ETB currency transactions.
    """

    region = ETHIOPIA
    senders = Senders(exact=("CBE",), contains=("COMMERCIALBANK", "CBEBANK"), dlt_codes=("CBE",))

    EXTRA_VERBS = (
        "dear", "your account", "has been credited", "has been debited", "you have transfered",
        "current balance", "thank you for banking with cbe", "etb",
    )

    AMOUNT = Cascade(
        amount(r"ETB\s*" + NUMBER + r"(?:\s|$|\.)"),
        amount(r"(?:Credited|debited|transfered)\s+(?:with\s+)?ETB\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "has been credited", "credited with"),
        when(TransactionType.EXPENSE, "has been debited", "debited with"),
        when(TransactionType.EXPENSE, "you have transfered", "transferred"),
    )

    MERCHANT = Cascade(
        rule(r"\bfrom\s+([^,\s]+\*{0,3}[^,\s]*)", _unstarred),
        rule(r"\bto\s+([^,\s]+\*{0,5}[^,\s]*)", _unstarred),
        label(r"s\.charge|service\s+charge", "Service Charge"),
    )

    ACCOUNT = Cascade(group(r"Account\s+\d?\*+(\d{4})"))

    BALANCE = Cascade(amount(r"Current\s+Balance\s+is\s+ETB\s+" + NUMBER))

    REFERENCE = Cascade(
        rule(r"Ref\s+No\s+(\**[A-Z0-9]+)", _unstarred),
        group(r"id=([A-Z0-9]+)"),
        group(r"\bon\s+(\d{2}/\d{2}/\d{4}\s+at\s+\d{2}:\d{2}:\d{2})"),
    )

    def get_bank_name(self) -> str:
        return "Commercial Bank of Ethiopia"
