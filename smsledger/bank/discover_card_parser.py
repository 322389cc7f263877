import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType

_USD = r"\$(\d[\d,]*(?:\.\d{2})?)"
_DATE = re.compile(r"\w+\s+\d{1,2},\s+\d{4}")


def _not_a_date(match) -> Optional[str]:
    value = match.group(1).strip()
    return None if _DATE.match(value) else value


class DiscoverCardParser(BankParser):
    """Parser for Discover Card - handles USD credit card transactions.

    Every alert is a card transaction.
    """

    region = UNITED_STATES
    senders = Senders(exact=("DISCOVER", "347268"), contains=("DISCOVERCARD",), dlt_codes=("DISCOVER",))

    EXTRA_VERBS = ("discover card alert:", "transaction of", "no action needed", "see it at https://app.discover.com")

    AMOUNT = Cascade(
        amount(r"transaction\s+of\s+" + _USD),
        amount(_USD + r"\s+at"),
    )

    TYPES = DecisionTable(when(TransactionType.EXPENSE, "discover card alert", "transaction of", "transaction"))

    MERCHANT = Cascade(
        rule(r"\bat\s+(\S+(?:\s+\S*)*?)(?:\s+on|\s+Text|$)", _not_a_date),
        group(r"\bat\s+(PAYPAL\s+\*\S+)"),
    )

    REFERENCE = Cascade(group(r"\bon\s+(\w+\s+\d{1,2},\s+\d{4})"))

    def get_bank_name(self) -> str:
        return "Discover Card"

    def detect_is_card(self, message: str) -> bool:
        return True

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "text stop to end" in lower and "transaction of" not in lower:
            return False
        return super().is_transaction_message(message)
