from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType


def _remitter(match):
    name = match.group(1).strip()
    return "UPI Transfer" if "UCO-UPI" in name.upper() else name


class UCOBankParser(BankParser):
    """
    Parser for UCO Bank SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("UCOBNK", "UCOBANK", "UCO BANK"), dlt_codes=("UCOBNK", "UCOBANK"))

    AMOUNT = Cascade(amount(r"Rs\.?\s*" + NUMBER))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debited with"),
        when(TransactionType.INCOME, "credited with"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(rule(r"\bby\s+([^.]+?)(?:\.Avl|$)", _remitter))

    ACCOUNT = Cascade(
        group(r"A/c\s+(?:XX|\*\*)(\d{4})"),
        group(r"Account\s+XX(\d{4})"),
        group(r"Acc\s+XX(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"Avl\s+Bal\s+Rs\.?\s*" + NUMBER),
        amount(r"Available\s+Balance\s+Rs\.?\s*" + NUMBER),
        amount(r"Balance[:.]?\s*Rs\.?\s*" + NUMBER),
    )

    REFERENCE = Cascade(
        group(r"\bref[:#]?\s*(\w+)"),
        group(r"\btxn[:#]?\s*(\w+)"),
        group(r"transaction\s+id[:#]?\s*(\w+)"),
    )

    def get_bank_name(self) -> str:
        return "UCO Bank"
