from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import UNITED_STATES
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, to_decimal, when
from smsledger.transaction_type import TransactionType


def _signed_dollars(match) -> Optional[Decimal]:
    # "-$12.40" is an overdrawn account
    return to_decimal(match.group(1).replace("$", ""))


class HuntingtonBankParser(BankParser):
    """
    Parser for Huntington Bank SMS messages (USA).
    """

    region = UNITED_STATES
    senders = Senders(contains=("HUNTINGTON",), dlt_codes=("HUNTINGTON",))

    EXTRA_VERBS = (
        "we processed a debit card withdrawal", "we processed an atm withdrawal",
        "we processed an ach withdrawal",
    )

    AMOUNT = Cascade(amount(r"withdrawal:\s+\$" + NUMBER + r"\s+at"))

    TYPES = DecisionTable(when(TransactionType.EXPENSE, "withdrawal")) + UNITED_STATES.TYPES

    MERCHANT = Cascade(group(r"\bat\s+(.+?)\.\s+Acct"))

    ACCOUNT = Cascade(
        group(r"Acct\s+CK(\d{4})"),
        group(r"account\s+ending\s+(\d{4})"),
    )

    BALANCE = Cascade(rule(r"has\s+a\s+(-?\$[0-9,]+(?:\.\d{2})?)\s+bal", _signed_dollars))

    def get_bank_name(self) -> str:
        return "Huntington Bank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if "heads up" in lower and "withdrawal" not in lower:
            return False
        return super().is_transaction_message(message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        if "debit card withdrawal" in lower or "atm withdrawal" in lower:
            return True
        if "ach withdrawal" in lower:
            return False
        return super().detect_is_card(message)

    def clean_merchant_name(self, merchant: str) -> str:
        # Payees are quoted as posted, "Inc"/"LLC" included
        return " ".join(merchant.split()).rstrip(".")
