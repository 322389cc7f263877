import re

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.fab_parser import coded_amount
from smsledger.bank.regions import GULF
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, contains_any, group, label, rule, scan, when
from smsledger.transaction_type import TransactionType


def _visible_tail(match):
    tail = match.group(1).replace("X", "").replace("x", "")
    return tail[-4:] or None


class LivBankParser(BankParser):
    """
    Parser for Liv Bank (UAE) - Digital bank.
    """

    region = GULF
    senders = Senders(contains=("LIV",))

    EXTRA_VERBS = ("has been credited", "purchase of", "debit card ending", "credit card ending")
    NOT_TRANSACTIONS = (
        "do not share", "activation", "has been blocked", "has been activated", "failed", "declined",
        "insufficient balance",
    )
    CARD_CUES = ("debit card ending", "credit card ending", "purchase of")

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "has been credited", "credited to account", "refund", "cashback"),
        when(TransactionType.EXPENSE, "purchase of", "debited", "withdrawn"),
    ) + GULF.TYPES

    MERCHANT = Cascade(
        group(r"\bat\s+([^,]+?)(?:,|\s+Avl|\.\s)", requires=("purchase of",)),
        group(r"\bat\s+([^.]+?)(?:\s+Avl|,)", requires=("purchase of",)),
        label(r"has\s+been\s+credited", "Account Credit"),
    )

    ACCOUNT = Cascade(
        group(r"(?:Debit|Credit)\s+Card\s+ending\s+(\d{4})"),
        rule(r"account\s+[0-9X]+([0-9A-Z]{2,4})", _visible_tail),
    )

    BALANCE = Cascade(
        scan(r"Current\s+balance\s+is\s+([A-Z]{3})\s+" + NUMBER, coded_amount),
        scan(r"Avl\s+Balance\s+is\s+([A-Z]{3})\s+" + NUMBER, coded_amount),
        scan(r"Balance:?\s+([A-Z]{3})\s+" + NUMBER, coded_amount),
    )

    def get_bank_name(self) -> str:
        return "Liv Bank"

    def can_handle(self, sender: str) -> bool:
        return super().can_handle(re.sub(r"\s+", "", sender))

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)

    def detect_is_card(self, message: str) -> bool:
        if contains_any(message.lower(), self.CARD_CUES):
            return True
        return super().detect_is_card(message)
