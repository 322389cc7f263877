import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType

_TXT_STOP = re.compile(r"Txt\s+STOP.*", re.IGNORECASE)


class NavyFederalParser(BankParser):
    """
    Parser for Navy Federal Credit Union (NFCU) - handles USD debit card and credit card transactions.

    Declined authorisations are not transactions.
    """

    region = UNITED_STATES
    senders = Senders(exact=("NFCU", "NAVYFED"), contains=("NAVY FEDERAL", "NAVYFEDERAL"), dlt_codes=("NFCU",))

    EXTRA_VERBS = ("transaction for", "was approved on")

    AMOUNT = Cascade(amount(r"for\s+\$" + NUMBER + r"\s+was\s+(?:approved|declined)"))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "was approved"),
        when(None, "was declined"),
        when(TransactionType.CREDIT, "payment received", "deposit"),
    )

    MERCHANT = Cascade(
        group(r"on\s+(?:debit|credit)\s+card\s+\d{4}\s+at\s+(.+?)\s+at\s+\d{2}:\d{2}"),
        rule(r"on\s+(?:debit|credit)\s+card\s+\d{4}\s+at\s+(.+?)(?:\.|$)", lambda m: _TXT_STOP.sub("", m.group(1)).strip()),
    )

    ACCOUNT = Cascade(group(r"(?:debit|credit)\s+card\s+(\d{4})"))

    def get_bank_name(self) -> str:
        return "Navy Federal Credit Union"

    def is_transaction_message(self, message: str) -> bool:
        if "was declined" in message.lower():
            return False
        return super().is_transaction_message(message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        return "debit card" in lower or "credit card" in lower or super().detect_is_card(message)
