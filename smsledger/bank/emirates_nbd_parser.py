import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.fab_parser import coded_amount
from smsledger.bank.regions import GULF
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, group, scan, when
from smsledger.transaction_type import TransactionType


class EmiratesNBDParser(BankParser):
    """
    Parser for Emirates NBD Bank (UAE) transactions.
    """

    region = GULF
    senders = Senders(contains=("EMIRATESNBD", "ENBD", "EMIRATESNB"))

    EXTRA_VERBS = ("purchase of", "transfer")

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited", "deposited", "refund", "cashback", "received"),
        when(TransactionType.CREDIT, "purchase of", all_of=("credit card",)),
        when(TransactionType.EXPENSE, "debited", "withdrawn", "transfer"),
    ) + GULF.TYPES

    MERCHANT = Cascade(
        group(r"\bat\s+(.+?)(?:\.\s*Avl|$)"),
        group(r"\bto\s+([A-Z][A-Z0-9\s]+?)(?:\s+on|\s+\(|$)"),
    )

    ACCOUNT = Cascade(
        group(r"ending\s+(\d{4})"),
        group(r"[xX]{4}(\d{4})", flags=0),
    )

    BALANCE = Cascade(
        scan(r"(?:Avl\s+Bal|Available\s+Balance)(?:\s+is)?:?\s*([A-Z]{3})\s+" + NUMBER, coded_amount),
    )

    LIMIT = Cascade(
        scan(r"Avl\s+Cr\.?\s+Limit(?:\s+is)?\s*([A-Z]{3})\s+" + NUMBER, coded_amount),
        scan(r"Available\s+Credit\s+Limit:\s*([A-Z]{3})\s+" + NUMBER, coded_amount),
    )

    def get_bank_name(self) -> str:
        return "Emirates NBD"

    def can_handle(self, sender: str) -> bool:
        return super().can_handle(re.sub(r"\s+", "", sender))

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)
