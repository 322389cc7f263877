import re
from decimal import Decimal
from typing import Optional

from smsledger.bank.bank_parser import BankParser
from smsledger.bank.regions import BELARUS
from smsledger.bank.senders import Senders
from smsledger.cascade import Cascade, DecisionTable, amount, contains_any, group, rule, when
from smsledger.transaction_type import TransactionType


class PriorbankParser(BankParser):
    """
    Parser for Priorbank (Belarus) SMS messages.

    Alerts are transliterated Russian: ``Oplata`` is a payment and
    ``Dostupno`` the remaining balance.
    """

    region = BELARUS
    senders = Senders(contains=("PRIORBANK",))

    AMOUNT = Cascade(amount(r"Oplata\s+([0-9]+(?:\.\d{2})?)\s+BYN"))

    TYPES = DecisionTable(
        when(TransactionType.EXPENSE, "oplata"),
        when(TransactionType.INCOME, "popolnenie", "zachislenie"),
    )

    MERCHANT = Cascade(
        group(r'"([^"]+)"'),
        rule(r"BYN\.\s+([^.]+?)\.\s+Dostupno", lambda m: re.sub(r"^BLR\s+", "", m.group(1).strip(), flags=re.I)),
    )

    ACCOUNT = Cascade(group(r"Karta\s+[6-9]\*+(\d{4})"))

    BALANCE = Cascade(amount(r"Dostupno:\s+([0-9]+(?:\.\d{2})?)\s+BYN"))

    def get_bank_name(self) -> str:
        return "Priorbank"

    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()
        if contains_any(lower, ("otp", "kod", "parol")):
            return False
        return contains_any(lower, ("oplata", "karta", "dostupno"))

    def extract_amount(self, message: str) -> Optional[Decimal]:
        return self.AMOUNT(message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return self.MERCHANT(message, transform=self.clean_merchant_name, accept=self.is_valid_merchant_name)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return self.ACCOUNT(message)

    def extract_balance(self, message: str) -> Optional[Decimal]:
        return self.BALANCE(message)
