from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, label, rule, when
from smsledger.transaction_type import TransactionType


def _unmasked(match) -> Optional[str]:
    value = match.group(1)
    return None if "x" in value.lower() else value


class AirtelPaymentsBankParser(BankParser):
    """Parser for Airtel Payments Bank SMS messages"""

    region = INDIA
    senders = Senders(contains=("AIRBNK",))

    NOT_TRANSACTIONS = ("verification", "request", "failed")

    AMOUNT = Cascade(
        amount(r"credited\s+with\s+Rs\.?\s*" + NUMBER),
        amount(r"Rs\.?\s*" + NUMBER + r"\s+debited\s+from"),
        amount(r"debited\s+with\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited with", "is credited", "credit"),
        when(TransactionType.EXPENSE, "debited from", "debited with", "debit"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(label(r"airtel\s+payments\s+bank", "Airtel Payments Bank Transaction"))

    REFERENCE = Cascade(
        rule(r"Txn\s+ID[:\s]+([A-Z0-9]+)", _unmasked),
        rule(r"Transaction\s+ID[:\s]+([A-Z0-9]+)", _unmasked),
    )

    BALANCE = Cascade(
        amount(r"\bBal[:\s]+" + NUMBER),
        amount(r"Balance[:\s]+Rs\.?\s*" + NUMBER),
    )

    def get_bank_name(self) -> str:
        return "Airtel Payments Bank"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "Airtel Payments Bank"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)
