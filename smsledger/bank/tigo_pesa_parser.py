from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import TANZANIA_MOBILE
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType

# Sending institution of an incoming TIPS (instant payment) transfer
TIPS_SOURCES = (("Selcom", "Selcom"), ("NMB", "NMB Bank"), ("CRDB", "CRDB Bank"))


def _tips_source(match) -> str:
    source = match.group(1)
    for marker, name in TIPS_SOURCES:
        if marker in source:
            return name + " (TIPS Transfer)"
    return "TIPS Transfer"


class TigoPesaParser(BankParser):
    """
    Parser for Tigo Pesa / Mixx by Yas (Tanzania) mobile money SMS messages.
    """

    region = TANZANIA_MOBILE
    senders = Senders(exact=("TIGO",), contains=("TIGOPESA", "TIGO PESA", "MIXX BY YAS", "MIXXBYYAS"))

    KEYWORDS = (
        "cash-in", "you have sent", "you have paid", "you have received", "transfer successful",
        "is successful", "new balance",
    )

    AMOUNT = Cascade(
        amount(r"(?:Cash-In\s+of|sent|received|paid)\s+TSh\s*" + NUMBER),
        amount(r"TSh\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "cash-in", "you have received", "received tsh"),
        when(TransactionType.INCOME, "transfer successful", all_of=("received",)),
        when(TransactionType.EXPENSE, "you have sent", "you have paid"),
    )

    MERCHANT = Cascade(
        rule(r"from\s+Agent\s*-?\s*([A-Z][A-Za-z\s]+?)\s+is\s+successful", lambda m: "Agent - " + m.group(1).strip()),
        group(r"to\s+[\dX]+\s*-\s*([A-Z][A-Za-z\s]+?)(?:\.|Total|$)"),
        group(r"paid\s+TSh\s*[0-9,]+(?:\.[0-9]{2})?\s+to\s+([A-Za-z0-9\s&]+?)(?:\.|Charges|$)"),
        rule(r"from\s+(TIPS\.[A-Za-z0-9_.]+)", _tips_source),
        group(r"to\s+([A-Z][A-Za-z\s]+?)(?:\.|,|Charges|Total|$)"),
    )

    BALANCE = Cascade(amount(r"New\s+balance\s+is\s+TSh\s*" + NUMBER))

    REFERENCE = Cascade(
        group(r"(?:TxnId|Trnx\s+ID):\s*(\d+)"),
    )

    def get_bank_name(self) -> str:
        return "Tigo Pesa"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        return "tsh" in lower and contains_any(lower, self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)

    def extract_reference(self, message: str) -> Optional[str]:
        return self.REFERENCE(message)
