from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import PAKISTAN
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, contains_any, group, label, rule, to_decimal, when
from smsledger.transaction_type import TransactionType


def _rupees(match) -> Optional[Decimal]:
    # "PKR 1.500.00": only the last dot is the decimal point
    raw = match.group(1).replace(",", "").rstrip(".")
    if raw.count(".") > 1:
        whole, _, fraction = raw.rpartition(".")
        raw = whole.replace(".", "") + "." + fraction
    return to_decimal(raw)


def _card_merchant(match) -> str:
    return match.group(1).replace("*", "").replace(",", "").strip()


class FaysalBankParser(BankParser):
    """
    Parser for Faysal Bank (Pakistan) app notifications and SMS.
    """

    region = PAKISTAN
    senders = Senders(exact=("8756",), contains=("FAYSAL", "FBL"))

    KEYWORDS = ("sent to", "transfer", "ibft", "received", "debit card purchase", "atm cash withdrawal")

    AMOUNT = Cascade(rule(r"PKR\s*([0-9.,]+)", _rupees))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "debit card purchase", "atm cash withdrawal"),
        when(TransactionType.TRANSFER, "sent to"),
        when(TransactionType.INCOME, "received", "credited"),
    ) + PAKISTAN.TYPES

    MERCHANT = Cascade(
        rule(r"debit\s+card\s+purchase\s+at\s+(.+?)\s+from", _card_merchant),
        group(r"received\s+(?:pkr\s+[0-9.,]+\s+)?(?:via\s+\w+\s+)?from\s+([A-Za-z\s.]+?)\s+(?:A/C|IBAN)"),
        group(r"sent\s+to\s+([A-Za-z.\s]+?)\s+A/C"),
        label(r"atm\s+cash\s+withdrawal", "ATM Cash Withdrawal"),
        group(r"received\s+from\s+([A-Za-z\s.]+)"),
    )

    # Greedy prefix: the last account mentioned is the customer's own
    ACCOUNT = Cascade(
        group(r"[\s\S]*FBL\s+A/C\s*[*#Xx]+(\d{4})"),
        group(r"[\s\S]*A/c\s*#?\s*[*#Xx]+(\d{4})"),
    )

    REFERENCE = Cascade(group(r"Ref\s*#?:?\s*([A-Za-z0-9-]+)"))

    def get_bank_name(self) -> str:
        return "Faysal Bank"

    def can_handle(self, sender: str) -> bool:
        return super().can_handle(sender.replace(" ", ""))

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        return "pkr" in lower and contains_any(lower, self.KEYWORDS)

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return super().extract_merchant(message, sender) or "IBFT Transfer"

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def detect_is_card(self, message: str) -> bool:
        return "debit card purchase" in message.lower() or super().detect_is_card(message)
