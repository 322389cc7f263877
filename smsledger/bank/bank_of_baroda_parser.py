import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


def _payee(match):
    return re.split(r"\s+Total\s+Bal", match.group(1).strip(), flags=re.IGNORECASE)[0].strip()


def _vpa_payee(match):
    name = match.group(1).split("@")[0]
    return "UPI Payment" if name.lower() == "redacted" else name


class BankOfBarodaParser(BankParser):
    """
    Parser for Bank of Baroda (BOB) SMS messages, including BOBCARD credit cards.

    BOB abbreviates movements as ``Dr. from`` / ``Cr. to``.
    """

    region = INDIA
    senders = Senders(
        exact=("BOB", "BANKOFBARODA"),
        contains=("BOB", "BARODA", "BOBSMS", "BOBTXN", "BOBCRD"),
    )

    EXTRA_VERBS = ("dr. from", "cr. to", "is spent")

    AMOUNT = Cascade(
        amount(r"ALERT:\s*INR\s*" + NUMBER + r"\s+is\s+spent"),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+transferred\s+from"),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+Dr\.?\s+from"),
        amount(r"credited\s+with\s+INR\s+" + NUMBER),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+Credited\s+to"),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+.*?Cr\.?\s+to"),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+deposited\s+in\s+cash"),
    )

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "bobcard", all_of=("spent",)),
        when(TransactionType.EXPENSE, "transferred from", "dr.", "debited"),
        when(TransactionType.INCOME, "cr.", "credited", "deposited"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"transferred\s+from\s+A/c\s+\S+\s+to:\s*([^.]+?)(?:\.|$)", _payee),
        rule(r"Cr\.?\s+to\s+(\S+@[^\s.]+)", _vpa_payee),
        group(r"IMPS/\d+\s+by\s+([^.]+?)(?:\s*\.|$)"),
        label(r"credited", "UPI Credit", requires=("upi",)),
        label(r"dr\.", "UPI Payment", requires=("upi",)),
        label(r"\bimps\b", "IMPS Transfer"),
        label(r"deposited in cash", "Cash Deposit"),
    )

    ACCOUNT = Cascade(
        group(r"BOBCARD\s+ending\s+(\d{4})"),
        rule(r"A/C\s+X*(\d{6})", lambda m: m.group(1)[-4:]),
        group(r"A/c\s+\.+(\d{4})"),
    )

    BALANCE = Cascade(
        amount(r"AvlBal:\s*Rs\.?\s*" + NUMBER),
        amount(r"Total\s+Bal:\s*Rs\.?\s*" + NUMBER),
        amount(r"Avlbl\s+Amt:\s*Rs\.?\s*" + NUMBER),
    )

    LIMIT = Cascade(amount(r"Available\s+credit\s+limit\s+is\s+Rs\.?\s*" + NUMBER))

    REFERENCE = Cascade(
        group(r"\bRef:\s*(\d+)"),
        group(r"UPI\s+Ref\s+No\s+(\d+)"),
        group(r"IMPS/(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "Bank of Baroda"
