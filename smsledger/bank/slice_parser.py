from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, group, label, when
from smsledger.transaction_type import TransactionType


class SliceParser(BankParser):
    """
    Parser for Slice card and account transactions.

    Every outgoing Slice movement is a spend on the Slice credit line.
    """

    region = INDIA
    senders = Senders(contains=("SLICE", "SLICEIT", "SLCEIT"))

    EXTRA_VERBS = ("sent",)

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited", "received", "cashback", "refund"),
        when(TransactionType.CREDIT, "debited", "spent", "paid", "sent", "payment"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"sent.*\bto\s+([A-Z][A-Z0-9\s./&-]+?)\s*\("),
        group(r"\bfrom\s+([A-Z][A-Z0-9\s]+?)(?:\s+on|\s+\(|$)"),
        label(r"paypal", "PayPal"),
        label(r"slice", "Slice Credit", requires=("credited",)),
    )

    def get_bank_name(self) -> str:
        return "Slice"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "Slice"
