from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, when
from smsledger.transaction_type import TransactionType


class JioPaymentsBankParser(BankParser):
    """
    Parser for Jio Payments Bank (JPB/JPBL) SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("JIOPBS",))

    EXTRA_VERBS = ("jpb a/c", "upi/cr", "upi/dr", "sent from")

    AMOUNT = Cascade(
        amount(r"credited\s+with\s+Rs\.?\s*" + NUMBER),
        amount(r"\bRs\.?\s*" + NUMBER + r"\s+Sent\s+from"),
        amount(r"debited\s+with\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited", "upi/cr"),
        when(TransactionType.EXPENSE, "debited", "upi/dr", "sent from"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"UPI/(?:CR|DR)/\d+/([^.\n]+?)(?:\s*\.|$)"),
        label(r"upi/cr", "UPI Credit"),
        label(r"upi/dr", "UPI Payment"),
        label(r"sent from", "Money Transfer"),
    )

    ACCOUNT = Cascade(
        group(r"JPB\s+A/c\s+x(\d{4})"),
        group(r"\bfrom\s+x(\d{4})"),
    )

    BALANCE = Cascade(amount(r"Avl\.?\s*Bal:\s*Rs\.?\s*" + NUMBER))

    REFERENCE = Cascade(group(r"UPI/(?:CR|DR)/(\d+)"))

    def get_bank_name(self) -> str:
        return "Jio Payments Bank"
