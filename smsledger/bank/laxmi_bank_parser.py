from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import NEPAL
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _remarks(match) -> str:
    remarks = match.group(1).strip()
    upper = remarks.upper()
    if "ESEWA LOAD" in upper:
        return "ESEWA"
    if "STIPEND PMT" in upper:
        return "Stipend Payment"
    return remarks.split("/")[0].strip()


def _short(match):
    value = match.group(1)
    return value[-4:] if len(value) > 4 else value


class LaxmiBankParser(BankParser):
    """
    Parser for Laxmi Sunrise Bank (Nepal) - handles NPR currency transactions.
    """

    region = NEPAL
    senders = Senders(exact=("LAXMI_ALERT",), contains=("LAXMI", "LAXMISUNRISE"))

    EXTRA_VERBS = ("dear customer", "has been debited", "has been credited", "laxmi sunrise", "remarks:", "npr")

    AMOUNT = Cascade(
        amount(r"NPR\s+" + NUMBER + r"(?:\s|$)"),
        amount(r"(?:debited|credited)\s+by\s+NPR\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "has been debited", "debited by"),
        when(TransactionType.INCOME, "has been credited", "credited by"),
    )

    MERCHANT = Cascade(
        rule(r"Remarks:\s*\(?([^)]+)\)?", _remarks),
        label(r"esewa", "ESEWA"),
    )

    ACCOUNT = Cascade(rule(r"Your\s+#(\d+)\s+has\s+been", _short))

    REFERENCE = Cascade(
        group(r"\bon\s+(\d{2}/\d{2}/\d{2})"),
        group(r"Remarks:.*?(\d{6,})"),
    )

    def get_bank_name(self) -> str:
        return "Laxmi Sunrise Bank"
