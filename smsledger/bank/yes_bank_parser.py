from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, rule, when
from smsledger.transaction_type import TransactionType


def _upi_name(match) -> Optional[str]:
    return " ".join(match.group(1).split()) or None


class YesBankParser(BankParser):
    """
    Parser for Yes Bank SMS messages.

    Card alerts ("spent on YES BANK Card ... Avl Lmt") are credit-card spends;
    ``SMS BLKCC <last4>`` is the block-card hint that also names the card.
    """

    region = INDIA
    senders = Senders(exact=("YESBNK", "YESBANK"), dlt_codes=("YESBNK",))

    EXTRA_VERBS = ("avl lmt",)

    AMOUNT = Cascade(amount(r"INR\s+" + NUMBER + r"\s+spent"))

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "spent", all_of=("yes bank card", "avl lmt")),
        when(TransactionType.EXPENSE, "debited", "withdrawn", "spent", "charged", "paid"),
        when(TransactionType.INCOME, "credited", "deposited", "received", "refund"),
    )

    MERCHANT = Cascade(
        rule(r"@UPI_([^0-9]+?)(?:\s+\d{2}-\d{2}-\d{4})", _upi_name),
        rule(r"@UPI_([A-Z\s]+)", _upi_name),
    )

    ACCOUNT = Cascade(
        rule(r"YES\s+BANK\s+Card\s+X*(\d+)", lambda m: m.group(1)[-4:]),
        group(r"SMS\s+BLKCC\s+(\d{4})"),
    )

    LIMIT = Cascade(amount(r"Avl\s+Lmt\s+INR\s+" + NUMBER))

    def get_bank_name(self) -> str:
        return "Yes Bank"

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        if "yes bank card" in lower or "sms blkcc" in lower:
            return True
        return super().detect_is_card(message)
