import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, rule, when
from smsledger.transaction_type import TransactionType

_USD = r"\$(\d[\d,]*(?:\.\d{2})?)"


def _part_of(match) -> str:
    info = match.group(1).strip()
    digits = re.search(r"(\d{4,})", info)
    return digits.group(1)[-4:] if digits else info


class OldHickoryParser(BankParser):
    """
    Parser for Old Hickory Credit Union (USA).

    Alerts are threshold notifications ("a transaction above the $X value
    you set has posted"), always debits.
    """

    region = UNITED_STATES
    senders = Senders(
        exact=("OLDHICKORY", "OHCU"),
        contains=("HICKORY",),
        dlt_codes=("HICKORY",),
    )
    PHONE = "8775907589"

    EXTRA_VERBS = ("transaction", "has posted", "posted to", "above the", "value you set", "account name")

    AMOUNT = Cascade(amount(_USD))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "has posted", "transaction for"),
        when(TransactionType.EXPENSE, "transaction", all_of=("posted",)),
    )

    MERCHANT = Cascade(rule(r"posted\s+to\s+([^(]+)", lambda m: "Account: " + m.group(1).strip()))

    ACCOUNT = Cascade(rule(r"\(part\s+of\s+([^)]+)\)", _part_of))

    REFERENCE = Cascade(rule(r"above\s+the\s+" + _USD + r"\s+value\s+you\s+set", lambda m: "Alert threshold: $" + m.group(1)))

    def get_bank_name(self) -> str:
        return "Old Hickory Credit Union"

    def can_handle(self, sender: str) -> bool:
        if re.sub(r"\D", "", sender) == self.PHONE:
            return True
        return super().can_handle(sender)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name) or "Transaction Alert"
