from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType

_USD = r"\$(\d[\d,]*(?:\.\d{2})?)"


class CitiBankParser(BankParser):
    """
    Parser for Citi Bank (USA) - handles USD credit card transactions.
    """

    region = UNITED_STATES
    senders = Senders(exact=("CITI", "692484"), contains=("CITIBANK",), dlt_codes=("CITI",))

    EXTRA_VERBS = (
        "citi alert:", "transaction was made", "card ending", "was not present for", "view details at citi.com",
    )

    AMOUNT = Cascade(
        amount(_USD + r"\s+transaction"),
        amount(r"transaction.*?" + _USD),
    )

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "transaction was made", "card ending", "was not present", "transaction"),
    )

    MERCHANT = Cascade(
        group(r"transaction\s+was\s+made\s+at\s+([^.]+?)(?:\s+on|$)"),
        group(r"transaction\s+at\s+([^.]+?)(?:\s+View|\.|$)"),
    )

    ACCOUNT = Cascade(group(r"card\s+ending\s+in\s+(\d{4})"))

    # Citi alerts carry no reference number; the transaction date stands in for one
    REFERENCE = Cascade(
        rule(r"\bon\s+(card\s+ending|\w+\s+\d{1,2},\s+\d{4})", lambda m: None if "card" in m.group(1).lower() else m.group(1)),
    )

    def get_bank_name(self) -> str:
        return "Citi Bank"
