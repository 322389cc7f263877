import re
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, contains_any, group, label, rule, when
from smsledger.transaction_type import TransactionType

_JIO_NUMBER = re.compile(r"Jio\s+Number\s*:\s*(\d{10})", re.IGNORECASE)


def _recharge(match) -> str:
    number = _JIO_NUMBER.search(match.string)
    return "Jio Recharge - " + number.group(1)[:4] + "****" if number else "Jio Recharge"


class JioPayParser(BankParser):
    """Parser for JioPay wallet transactions: recharges, bill payments and merchant payments."""

    region = INDIA
    senders = Senders(contains=("JIOPAY",), exact=("JM-JIOPAY",))

    EXTRA_VERBS = ("recharge successful",)
    NOT_TRANSACTIONS = ("e-bill", "bill has been sent", "bill summary", "payment due date", "amount payable")

    AMOUNT = Cascade(
        amount(r"Plan\s+Name\s*:\s*" + NUMBER),
        amount(r"Rs\.?\s*" + NUMBER),
    )

    TYPES = DecisionTable(when(TransactionType.CREDIT))

    MERCHANT = Cascade(
        rule(r"recharge\s+successful", _recharge, requires=("jio number",), final=True),
        label(r"electricity", "Electricity Bill", requires=("bill payment",)),
        label(r"water", "Water Bill", requires=("bill payment",)),
        label(r"\bgas\b", "Gas Bill", requires=("bill payment",)),
        label(r"broadband", "Broadband Bill", requires=("bill payment",)),
        label(r"\bdth\b", "DTH Recharge", requires=(("bill payment", "recharge"),)),
        label(r"bill\s+payment", "Bill Payment"),
        label(r"mobile", "Mobile Recharge", requires=("recharge",)),
        label(r"\bdata\b", "Data Recharge", requires=("recharge",)),
        label(r"recharge", "Recharge"),
        group(r"payment\s+successful\s+to\s+([^.\n]+)"),
        label(r"payment\s+successful\s+to", "JioPay Payment"),
    )

    REFERENCE = Cascade(group(r"Transaction\s+ID\s*:\s*([A-Z0-9]+)"))

    def get_bank_name(self) -> str:
        return "JioPay"

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "JioPay Transaction"

    def is_transaction_message(self, message: str) -> bool:
        if contains_any(message.lower(), self.NOT_TRANSACTIONS):
            return False
        return super().is_transaction_message(message)
