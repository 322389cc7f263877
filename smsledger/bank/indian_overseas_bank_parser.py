from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType


def _upi_payer(match) -> str:
    payer = match.group(1).strip()
    if "@" not in payer:
        return payer
    name, sep, upi_id = payer.partition("-")
    if sep:
        return f"UPI - {name.strip()} ({upi_id.strip()})"
    return "UPI - " + payer


def _remark(match) -> Optional[str]:
    remark = match.group(1).strip()
    return None if remark.lower() == "paid via supe" else remark


class IndianOverseasBankParser(BankParser):
    """
    Parser for Indian Overseas Bank (IOB) SMS messages.
    """

    region = INDIA
    senders = Senders(contains=("IOB", "IOBCHN"))

    NOT_TRANSACTIONS = ("verification", "request", "failed")

    AMOUNT = Cascade(
        amount(r"(?:credited|debited)\s+by\s+Rs\.?\s*" + NUMBER),
        amount(r"credited\s+with\s+Rs\.?\s*" + NUMBER),
        amount(r"debited\s+for\s+Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited by", "credited with", "is credited"),
        when(TransactionType.EXPENSE, "debited by", "debited for", "is debited"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        rule(r"\bfrom\s+([^(]+?)(?:\(UPI|$)", _upi_payer),
        rule(r"Payer\s+Remark\s*-\s*([^-]+)", _remark),
        group(r"(?:\bto|\bfor)\s+([^,.-]+)", requires=("debited",)),
    )

    ACCOUNT = Cascade(
        rule(r"a/c\s+no\.\s+X*(\d{2,4})", lambda m: m.group(1)[-4:]),
    )

    REFERENCE = Cascade(group(r"UPI\s+Ref\s+no\s+(\d+)"))

    def get_bank_name(self) -> str:
        return "Indian Overseas Bank"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)
