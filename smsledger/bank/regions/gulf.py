from decimal import Decimal
from typing import Optional

from smsledger.bank.regions.region import Region
from smsledger.cascade import NUMBER, Cascade, DecisionTable, contains_any, scan, to_decimal, when
from smsledger.constants import Constants
from smsledger.transaction_type import TransactionType


def _known_code_amount(match) -> Optional[Decimal]:
    # "DEC 05" looks like an ISO code followed by an amount
    if match.group(1).upper() not in Constants.Currency.KNOWN:
        return None
    return to_decimal(match.group(2).replace("*", ""))


class GulfRegion(Region):
    """UAE banks: AED home currency, cards that post in any currency.

    Amounts are written as ``<ISO code> <amount>`` and the code travels
    with the record, so a USD purchase on an AED card stays USD.
    """

    TRANSACTION_VERBS = Region.TRANSACTION_VERBS + (
        "remittance", "withdrawal", "cash deposit", "cheque", "has been processed",
        "funds transfer", "payment instructions",
    )
    CARD_CUES = Region.CARD_CUES + ("card purchase",)

    FOREIGN_AMOUNTS = Cascade(
        scan(r"(?:purchase of|transfer of|amount|for|of)\s+([A-Z]{3})\s+\*?" + NUMBER, _known_code_amount),
        scan(r"\b([A-Z]{3})\s*\*?" + NUMBER, _known_code_amount),
    )

    TYPES = DecisionTable(
        when(TransactionType.CREDIT, "credit card purchase"),
        when(TransactionType.EXPENSE, "debit card purchase"),
        when(TransactionType.INCOME, "cheque credited"),
        when(TransactionType.EXPENSE, "cheque returned"),
        when(TransactionType.EXPENSE, "atm cash withdrawal"),
        when(TransactionType.EXPENSE, "atm", all_of=("withdrawn",)),
        when(TransactionType.INCOME, "inward remittance", "cash deposit", "has been credited", "is credited"),
        when(TransactionType.EXPENSE, "outward remittance", "payment instructions"),
        when(TransactionType.TRANSFER, "funds transfer request"),
        when(TransactionType.EXPENSE, "has been processed"),
        when(TransactionType.INCOME, "credit", unless=("credit card", "debit", "purchase", "payment")),
        when(TransactionType.EXPENSE, "debit", unless=("credit",)),
        when(TransactionType.EXPENSE, "purchase", "payment"),
    ) + Region.TYPES

    def __init__(self):
        super().__init__("AED")

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.FOREIGN_AMOUNTS(message, fallback=super().extract_amount)

    def is_card_purchase(self, message: str) -> bool:
        return contains_any(message.lower(), ("credit card purchase", "debit card purchase"))


GULF = GulfRegion()
