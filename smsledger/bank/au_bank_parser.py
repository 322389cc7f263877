from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import INDIA
from smsledger.bank.senders import Senders
from smsledger.cascade import NUMBER, Cascade, DecisionTable, amount, group, label, rule, when
from smsledger.transaction_type import TransactionType


class AUBankParser(BankParser):
    """Parser for AU Small Finance Bank SMS messages"""

    region = INDIA
    senders = Senders(contains=("AUBANK",))

    EXTRA_VERBS = ("bal inr", "ref upi")

    AMOUNT = Cascade(
        amount(r"Credited\s+INR\s+" + NUMBER + r"\s+to"),
        amount(r"Debited\s+INR\s+" + NUMBER + r"\s+from"),
        amount(r"INR\s+" + NUMBER + r"\s+spent"),
        amount(r"withdrawn\s+INR\s+" + NUMBER),
    )

    TYPES = DecisionTable(
        when(TransactionType.INCOME, "credited", "received", "deposited", "refund"),
        when(TransactionType.EXPENSE, "debited", "withdrawn", "spent", "paid"),
    ) + INDIA.TYPES

    MERCHANT = Cascade(
        group(r"Ref\s+UPI/[^/]+/[^/]+/[^/]+\s+([^(]+)\([^)]+\)"),
        group(r"UPI/[^/]+/[^/]+/[^/]+\s+[^(]*\(([^)]+)\)"),
        label(r"\bATM\b|withdrawn", "ATM Withdrawal"),
        group(r"(?:\bto|\bfrom)\s+([^.\n]+?)(?:\.\s*|$)"),
    )

    ACCOUNT = Cascade(rule(r"A/c\s+(\d+)", lambda m: m.group(1)[-4:]))

    BALANCE = Cascade(amount(r"Bal\s+INR\s+" + NUMBER))

    def get_bank_name(self) -> str:
        return "AU Small Finance Bank"
